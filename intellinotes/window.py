"""Frameless main-window behaviour: resizing, dragging, theme and button icons."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from pathlib import Path

RESIZE_BORDER_SIZE = 8
MIN_RESIZE_WIDTH = 200
MIN_RESIZE_HEIGHT = 100

ICON_DIR = "icons/"
LIGHT_STYLE_SHEET = "styles/light_theme.qss"
DARK_STYLE_SHEET = "styles/dark_theme.qss"

LIGHT_ICON_COLOR = (50, 50, 50)
DARK_ICON_COLOR = (255, 255, 255)

Color = tuple[int, int, int]


class ResizeRegion(IntFlag):
    """Window edge or corner under the pointer."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT


class CursorShape(Enum):
    """Pointer shapes the window shows."""

    DEFAULT = "default"
    SIZE_VER = "size_ver"
    SIZE_HOR = "size_hor"
    SIZE_F_DIAG = "size_f_diag"
    SIZE_B_DIAG = "size_b_diag"


class MouseButton(Enum):
    """Mouse buttons that can trigger an event."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True)
class Point:
    """An integer point."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An integer rectangle whose right and bottom edges are inclusive."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_edges(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        return cls(left, top, right - left + 1, bottom - top + 1)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, point: Point) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def moved_to(self, top_left: Point) -> Rect:
        return dataclasses.replace(self, x=top_left.x, y=top_left.y)


_CURSORS = {
    ResizeRegion.TOP_LEFT: CursorShape.SIZE_F_DIAG,
    ResizeRegion.BOTTOM_RIGHT: CursorShape.SIZE_F_DIAG,
    ResizeRegion.TOP_RIGHT: CursorShape.SIZE_B_DIAG,
    ResizeRegion.BOTTOM_LEFT: CursorShape.SIZE_B_DIAG,
    ResizeRegion.TOP: CursorShape.SIZE_VER,
    ResizeRegion.BOTTOM: CursorShape.SIZE_VER,
    ResizeRegion.LEFT: CursorShape.SIZE_HOR,
    ResizeRegion.RIGHT: CursorShape.SIZE_HOR,
}


def resize_region(pos: Point, width: int, height: int) -> ResizeRegion:
    """Return the edge or corner of a ``width`` x ``height`` window under ``pos``."""
    top = pos.y <= RESIZE_BORDER_SIZE
    bottom = pos.y >= height - RESIZE_BORDER_SIZE
    left = pos.x <= RESIZE_BORDER_SIZE
    right = pos.x >= width - RESIZE_BORDER_SIZE

    # Corners take priority over edges; top wins over bottom, left over right.
    vertical = ResizeRegion.TOP if top else ResizeRegion.BOTTOM if bottom else ResizeRegion.NONE
    horizontal = ResizeRegion.LEFT if left else ResizeRegion.RIGHT if right else ResizeRegion.NONE
    return vertical | horizontal


def cursor_for_region(region: ResizeRegion) -> CursorShape:
    """Return the pointer shape shown over ``region``."""
    return _CURSORS.get(region, CursorShape.DEFAULT)


def load_style_sheet(path: str | Path) -> str:
    """Read a style sheet file as Latin-1 text. Raises ``OSError`` if unreadable."""
    return Path(path).read_text(encoding="latin-1")


@dataclass
class WindowChrome:
    """State machine for a frameless window's title bar and borders.

    ``geometry`` is the window rectangle on screen; ``title_bar`` is the
    draggable area in window coordinates, or ``None`` for no drag area.
    """

    geometry: Rect
    title_bar: Rect | None = None
    maximized: bool = False
    sidebar_visible: bool = True
    dark_theme: bool = False
    cursor: CursorShape = CursorShape.DEFAULT
    dragging: bool = field(default=False, init=False)
    resizing: bool = field(default=False, init=False)
    resize_region: ResizeRegion = field(default=ResizeRegion.NONE, init=False)
    _drag_offset: Point = field(default=Point(0, 0), init=False, repr=False)
    _resize_start_global: Point = field(default=Point(0, 0), init=False, repr=False)
    _resize_start_geometry: Rect | None = field(default=None, init=False, repr=False)

    def press(self, pos: Point, global_pos: Point, button: MouseButton) -> bool:
        """Handle a button press; return whether it started a resize or drag."""
        region = resize_region(pos, self.geometry.width, self.geometry.height)
        if region and button is MouseButton.LEFT and not self.maximized:
            self.resizing = True
            self.resize_region = region
            self._resize_start_global = global_pos
            self._resize_start_geometry = self.geometry
            return True
        if (
            button is MouseButton.LEFT
            and self.title_bar is not None
            and self.title_bar.contains(pos)
        ):
            self._drag_offset = pos
            self.dragging = True
            return True
        return False

    def move(self, pos: Point, global_pos: Point, left_held: bool) -> bool:
        """Handle pointer motion; return whether it resized or moved the window."""
        if self.resizing and self._resize_start_geometry is not None:
            self.geometry = self._resized(global_pos - self._resize_start_global)
            return True
        if self.dragging and left_held:
            self.geometry = self.geometry.moved_to(global_pos - self._drag_offset)
            return True
        if not self.maximized and not self.resizing:
            region = resize_region(pos, self.geometry.width, self.geometry.height)
            self.cursor = cursor_for_region(region)
        return False

    def _resized(self, delta: Point) -> Rect:
        start = self._resize_start_geometry
        assert start is not None
        region = self.resize_region
        left, top, right, bottom = start.left, start.top, start.right, start.bottom
        if region & ResizeRegion.TOP:
            top += delta.y
        if region & ResizeRegion.BOTTOM:
            bottom += delta.y
        if region & ResizeRegion.LEFT:
            left += delta.x
        if region & ResizeRegion.RIGHT:
            right += delta.x

        if right - left + 1 < MIN_RESIZE_WIDTH:
            if region & ResizeRegion.LEFT:
                left = right - MIN_RESIZE_WIDTH
            else:
                right = left + MIN_RESIZE_WIDTH - 1
        if bottom - top + 1 < MIN_RESIZE_HEIGHT:
            if region & ResizeRegion.TOP:
                top = bottom - MIN_RESIZE_HEIGHT
            else:
                bottom = top + MIN_RESIZE_HEIGHT - 1
        return Rect.from_edges(left, top, right, bottom)

    def release(self, button: MouseButton) -> bool:
        """Handle a button release; return whether it ended a resize or drag."""
        if self.resizing and button is MouseButton.LEFT:
            self.resizing = False
            self.resize_region = ResizeRegion.NONE
            self._resize_start_geometry = None
            self.cursor = CursorShape.DEFAULT
            return True
        if self.dragging and button is MouseButton.LEFT:
            self.dragging = False
            return True
        self.cursor = CursorShape.DEFAULT
        return False

    def toggle_sidebar(self) -> bool:
        """Show or hide the sidebar; return whether it is now visible."""
        self.sidebar_visible = not self.sidebar_visible
        return self.sidebar_visible

    def toggle_maximize(self) -> bool:
        """Maximize or restore the window; return whether it is now maximized."""
        self.maximized = not self.maximized
        return self.maximized

    def toggle_theme(self) -> str:
        """Switch between light and dark themes; return the style sheet to apply."""
        self.dark_theme = not self.dark_theme
        return DARK_STYLE_SHEET if self.dark_theme else LIGHT_STYLE_SHEET

    def button_icons(self) -> dict[str, tuple[str, Color]]:
        """Return each title-bar button's icon file and tint for the current state."""
        color = DARK_ICON_COLOR if self.dark_theme else LIGHT_ICON_COLOR
        sidebar = "round_left_fill.svg" if self.sidebar_visible else "round_right_fill.svg"
        maximize = "Minimize-filled.svg" if self.maximized else "Maximize-filled.svg"
        theme = "Sun.svg" if self.dark_theme else "month.svg"
        names = {
            "toggle_sidebar": sidebar,
            "minimize": "minis.svg",
            "maximize": maximize,
            "close": "round_close_fill.svg",
            "theme": theme,
            "settings": "setting.svg",
        }
        return {button: (ICON_DIR + name, color) for button, name in names.items()}