"""In-process binary messenger that routes channel messages to registered handlers."""

from __future__ import annotations

from typing import Callable

from loguru import logger

Reply = Callable[[bytes | None], None]
MessageHandler = Callable[[bytes | None, Reply], None]


class BinaryMessenger:
    """Routes raw messages by channel name. Replies are delivered on the sender's call path."""

    def __init__(self) -> None:
        self._handlers: dict[str, MessageHandler] = {}

    def set_message_handler(self, channel: str, handler: MessageHandler | None) -> None:
        name = str(channel).strip()
        if not name:
            raise ValueError("channel name is required")
        if handler is None:
            self._handlers.pop(name, None)
            return
        if not callable(handler):
            raise ValueError("message handler must be callable")
        self._handlers[name] = handler

    def has_handler(self, channel: str) -> bool:
        return channel in self._handlers

    def channels(self) -> list[str]:
        return sorted(self._handlers)

    def send(self, channel: str, message: bytes | None) -> bytes | None:
        """Deliver a message and return the reply. No handler means an empty reply."""
        handler = self._handlers.get(channel)
        if handler is None:
            logger.debug("No handler on channel {}", channel)
            return None
        replies: list[bytes | None] = []
        handler(message, replies.append)
        if not replies:
            logger.warning("Channel {} handler returned without replying", channel)
            return None
        return replies[0]
