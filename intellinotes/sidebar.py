"""Sidebar logic: note storage, note selection and the assistant chat."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import platformdirs

APP_NAME = "intellinotes"
NOTE_KIND = "note"

NoteOpenedListener = Callable[[str, str], None]
AIMessageListener = Callable[[str], None]

_GREETING_REPLY = "你好！我是您的AI助手，有什么可以帮助您的？"
_WEATHER_REPLY = "抱歉，我没有联网功能，无法查询天气信息。"
_HELP_REPLY = "我可以帮助您管理笔记、回答简单问题，或者提供一些建议。"
_TOO_SHORT_REPLY = "请提供更详细的信息，这样我才能更好地帮助您。"
_MIN_MESSAGE_LENGTH = 5


def ai_reply(message: str) -> str:
    """Return the canned assistant reply for a user message."""
    if "你好" in message or "您好" in message:
        return _GREETING_REPLY
    if "天气" in message:
        return _WEATHER_REPLY
    if "帮助" in message or "能做什么" in message:
        return _HELP_REPLY
    if len(message) < _MIN_MESSAGE_LENGTH:
        return _TOO_SHORT_REPLY
    return f'我收到了您的消息："{message}"。我正在学习中，希望能更好地为您服务。'


def default_notes_root() -> Path:
    """Return the default directory where notes are stored."""
    return platformdirs.user_data_path(APP_NAME) / "notes"


class SidebarManager:
    """Backs the sidebar: owns the notes directory and answers its requests.

    Listeners appended to ``note_opened`` are called with ``(path, content)``
    when a note is opened; listeners in ``ai_message_received`` get each
    assistant reply.
    """

    def __init__(self, root_path: str | Path | None = None) -> None:
        self.root_path = Path(root_path) if root_path is not None else default_notes_root()
        self.root_path.mkdir(parents=True, exist_ok=True)
        self.note_opened: list[NoteOpenedListener] = []
        self.ai_message_received: list[AIMessageListener] = []

    def select_note(self, path: str | Path, kind: str) -> str | None:
        """Open the item at ``path``.

        Only items of kind ``"note"`` are read; their text is passed to the
        ``note_opened`` listeners and returned. Other kinds return ``None``.
        Raises ``OSError`` when the note cannot be read.
        """
        if kind != NOTE_KIND:
            return None
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
        for listener in self.note_opened:
            listener(str(path), content)
        return content

    def send_ai_message(self, message: str) -> str:
        """Answer a chat message and notify the ``ai_message_received`` listeners."""
        reply = ai_reply(message)
        for listener in self.ai_message_received:
            listener(reply)
        return reply