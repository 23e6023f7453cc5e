"""Shared fakes standing in for the messaging platform.

The fakes record every call the paginator makes so tests can assert on edits,
reactions, and cleanup without a network. Event delivery is an
:class:`asyncio.Queue` drained by ``FakeMessage.events``; push clicks with
``FakeMessage.click`` and wait for them with :func:`drain`.
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ

import pytest

from paged_embed import NavigationEvent, Viewer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from paged_embed import EmbedDocument, InteractionSession


class FakeMessage:
    """In-memory message handle recording edits and reactions."""

    def __init__(self) -> None:
        self.edits: list[dict[str, typ.Any]] = []
        self.reactions: list[str] = []
        self.removed: list[tuple[str, str]] = []
        self.cleared = False
        self.edit_errors: list[Exception] = []
        self.remove_error: Exception | None = None
        self.clear_error: Exception | None = None
        self.inbox: asyncio.Queue[NavigationEvent | Exception | None] = (
            asyncio.Queue()
        )

    async def edit(self, document: EmbedDocument) -> None:
        if self.edit_errors:
            raise self.edit_errors.pop(0)
        self.edits.append(document.to_dict())

    async def add_reaction(self, emoji: str) -> None:
        self.reactions.append(emoji)

    async def remove_reaction(self, emoji: str, viewer: Viewer) -> None:
        if self.remove_error is not None:
            raise self.remove_error
        self.removed.append((emoji, viewer.id))

    async def clear_reactions(self) -> None:
        if self.clear_error is not None:
            raise self.clear_error
        self.cleared = True

    def events(self) -> cabc.AsyncIterator[NavigationEvent]:
        return self._stream()

    async def _stream(self) -> cabc.AsyncIterator[NavigationEvent]:
        while True:
            item = await self.inbox.get()
            if item is None:
                return
            if isinstance(item, Exception):
                raise item
            yield item

    def click(
        self, action: str, user_id: str = "viewer", *, bot: bool = False
    ) -> None:
        self.inbox.put_nowait(NavigationEvent(action, Viewer(user_id, bot=bot)))

    def fail(self, exc: Exception) -> None:
        self.inbox.put_nowait(exc)

    def close(self) -> None:
        self.inbox.put_nowait(None)

    @property
    def footers(self) -> list[str]:
        return [edit["footer"]["text"] for edit in self.edits]


class FakeChannel:
    """Channel target returning a fixed message."""

    def __init__(self, message: FakeMessage) -> None:
        self.message = message
        self.sent: list[dict[str, typ.Any]] = []

    async def send(
        self,
        content: str | None,
        *,
        document: EmbedDocument,
        components: cabc.Sequence[typ.Any] = (),
    ) -> FakeMessage:
        self.sent.append(
            {
                "content": content,
                "document": document.to_dict(),
                "components": list(components),
            }
        )
        return self.message


class FakeInteraction:
    """Interaction target recording replies and follow-ups."""

    def __init__(
        self, message: FakeMessage, *, user_id: str = "author", repliable: bool = True
    ) -> None:
        self.message = message
        self.user = Viewer(user_id)
        self.repliable = repliable
        self.replies: list[dict[str, typ.Any]] = []
        self.follow_ups: list[dict[str, typ.Any]] = []

    def is_repliable(self) -> bool:
        return self.repliable

    async def reply(
        self,
        content: str | None,
        *,
        document: EmbedDocument,
        components: cabc.Sequence[typ.Any] = (),
        ephemeral: bool = False,
    ) -> FakeMessage:
        self.replies.append(
            {"content": content, "ephemeral": ephemeral, "components": components}
        )
        return self.message

    async def follow_up(
        self,
        content: str | None,
        *,
        document: EmbedDocument,
        components: cabc.Sequence[typ.Any] = (),
        ephemeral: bool = False,
    ) -> FakeMessage:
        self.follow_ups.append(
            {"content": content, "ephemeral": ephemeral, "components": components}
        )
        return self.message


async def drain(message: FakeMessage, session: InteractionSession) -> None:
    """Wait until every click pushed so far has been handled."""
    while not message.inbox.empty():
        await asyncio.sleep(0)
    await session.join()


@pytest.fixture
def fake_message() -> FakeMessage:
    """Return a fresh in-memory message handle."""
    return FakeMessage()


@pytest.fixture
def fake_channel(fake_message: FakeMessage) -> FakeChannel:
    """Return a channel target that transmits ``fake_message``."""
    return FakeChannel(fake_message)


@pytest.fixture
def fake_interaction(fake_message: FakeMessage) -> FakeInteraction:
    """Return a repliable interaction triggered by user ``author``."""
    return FakeInteraction(fake_message)


@pytest.fixture
def drain_events() -> typ.Callable[
    [FakeMessage, InteractionSession], cabc.Awaitable[None]
]:
    """Return :func:`drain` for tests that push clicks through the transport."""
    return drain


@pytest.fixture(autouse=True)
def _restore_package_logger() -> cabc.Iterator[None]:
    """Undo handlers and levels installed by ``configure_logging``."""
    logger = logging.getLogger("paged_embed")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
