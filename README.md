# intellinotes

The behaviour behind a desktop notes application. It does not depend on any
GUI toolkit. It has two parts:

- **The notes sidebar** (`intellinotes.sidebar`). It keeps the notes
  directory, opens the note the user picks, and gives the canned replies of
  the built-in assistant.
- **The window chrome** (`intellinotes.window`). This is the logic of a
  frameless main window: which edge or corner the pointer is on, the cursor
  shape for it, resizing and dragging with the mouse, the minimum resize size,
  maximize and restore, showing and hiding the sidebar, the light and dark
  themes, and the icon each title-bar button should show.

## Sidebar

```python
from intellinotes.sidebar import SidebarManager, ai_reply, default_notes_root

manager = SidebarManager(default_notes_root())

# Listeners are plain callables kept in lists.
manager.note_opened.append(lambda path, content: print(path, len(content)))
manager.ai_message_received.append(print)

# Open a note: kind "note" reads the file's text as UTF-8 and returns it.
manager.select_note("/path/to/note.md", "note")

# Any other kind is ignored and returns None.
manager.select_note("/path/to/folder", "folder")

# Ask the assistant; the reply is returned and passed to the listeners.
manager.send_ai_message("你好")

# The reply rules on their own:
ai_reply("今天天气怎么样")  # "抱歉，我没有联网功能，无法查询天气信息。"
```

`default_notes_root()` returns the `notes` folder inside the user's
application-data directory for `intellinotes`. `SidebarManager(root_path)`
stores the path as `root_path` and creates the directory, with any missing
parents, if it does not exist yet. If `root_path` is `None`, it uses
`default_notes_root()`.

`select_note` raises `OSError` when a note cannot be read. The
`note_opened` listeners are called with `(path, content)` only after the read
succeeds.

Assistant replies follow these rules, in this order:

1. A greeting (`你好` or `您好`) gets a greeting back.
2. A message mentioning the weather (`天气`) gets an apology, because there is no network access.
3. A request for help (`帮助` or `能做什么`) gets a list of what the assistant can do.
4. A message shorter than five characters gets a request for more detail.
5. Any other message is echoed back in quotes with a short acknowledgement.

## Window chrome

```python
from intellinotes.window import (
    MouseButton, Point, Rect, WindowChrome, cursor_for_region, resize_region,
)

region = resize_region(Point(2, 2), 800, 600)   # ResizeRegion.TOP_LEFT
cursor_for_region(region)                        # CursorShape.SIZE_F_DIAG

chrome = WindowChrome(Rect(100, 100, 800, 600), Rect(0, 0, 800, 40))
chrome.press(Point(799, 300), Point(899, 400), MouseButton.LEFT)  # grab the right edge
chrome.move(Point(849, 300), Point(949, 400), True)               # drag it 50 px wider
chrome.release(MouseButton.LEFT)
chrome.geometry                                                   # Rect(100, 100, 850, 600)

chrome.toggle_theme()      # "styles/dark_theme.qss"
chrome.toggle_sidebar()    # False: the sidebar is now hidden
chrome.toggle_maximize()   # True: the window is now maximized
chrome.button_icons()      # {"toggle_sidebar": ("icons/round_right_fill.svg", (255, 255, 255)), ...}
```

`Point` and `Rect` are frozen dataclasses. A `Rect`'s `right` and `bottom`
edges are inclusive. `Rect.from_edges(left, top, right, bottom)` builds one
from its edges.

`WindowChrome` holds the window's `geometry`, its draggable `title_bar` in
window coordinates (or `None`), and the flags `maximized`, `sidebar_visible`
and `dark_theme`. It also holds the current `cursor` and whether it is
`dragging` or `resizing`. `press`, `move` and `release` each return whether
the event was used for a resize or a drag.

- The edge zone where the pointer starts a resize is 8 pixels wide.
  Corners take priority over edges.
- A left-button press on an edge starts a resize, unless the window is
  maximized. A left-button press inside the title bar starts a drag that
  moves the window.
- A resize never makes the window narrower than 200 or lower than 100 pixels.
- When nothing is being resized or dragged, a move updates `cursor` for the
  region under the pointer. It does not do this while the window is maximized.
- `button_icons()` gives each button (`toggle_sidebar`, `minimize`,
  `maximize`, `close`, `theme`, `settings`) an icon path under `icons/` and a
  tint. The tint is `(50, 50, 50)` in the light theme and `(255, 255, 255)`
  in the dark theme.

`load_style_sheet(path)` reads a style sheet file as Latin-1 text and raises
`OSError` if it cannot be read.

## What this package does not do

- It has no user interface and no command. It only models the window's
  behaviour and gives back states, geometries, file names and tints. Drawing
  the window and its icons is up to the caller.
- It does not ship any icons or style sheets. `toggle_theme()` and
  `button_icons()` return relative file names only.
- It cannot create, rename or delete notes or folders, and it has no settings
  screen. The only note operation it offers is reading one with `select_note`.
- The assistant gives fixed replies. It does not connect to any service.

## Tests

The test suite uses pytest. pytest is listed in the `test` extra.