"""Capabilities the paginator expects from the messaging platform.

Nothing in this module talks to a remote service. It declares the protocols a
platform adapter implements (message handles, channel and interaction send
targets) together with the event and error types that cross that boundary.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .renderer import Document


class TransportError(RuntimeError):
    """Raised by platform adapters when a remote call fails."""


class MessageDeletedError(TransportError):
    """Raised when the transmitted message no longer exists."""


@dc.dataclass(frozen=True, slots=True)
class Viewer:
    """Identity of whoever produced an interaction event."""

    id: str
    bot: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavigationEvent:
    """A click on one of the navigation controls.

    Attributes
    ----------
    action : str
        The control that was used, normally ``PREVIOUS`` or ``NEXT``.
    viewer : Viewer
        Who used it.
    """

    action: str
    viewer: Viewer


class MessageHandle(typ.Protocol):
    """A transmitted message that can be edited and carries reactions."""

    async def edit(self, document: Document) -> None: ...

    async def add_reaction(self, emoji: str) -> None: ...

    async def remove_reaction(self, emoji: str, viewer: Viewer) -> None: ...

    async def clear_reactions(self) -> None: ...

    def events(self) -> cabc.AsyncIterator[NavigationEvent]:
        """Yield reaction events as they arrive.

        The iterator raises :class:`MessageDeletedError` when the message is
        deleted. Finishing ends the session once the events already queued have
        been handled; any other :class:`TransportError` ends it straight away.
        """
        ...


class ChannelTarget(typ.Protocol):
    """A channel-like destination."""

    async def send(
        self,
        content: str | None,
        *,
        document: Document,
        components: cabc.Sequence[typ.Any] = (),
    ) -> MessageHandle: ...


class InteractionTarget(typ.Protocol):
    """An interaction-like destination that is answered by replying."""

    user: Viewer

    def is_repliable(self) -> bool: ...

    async def reply(
        self,
        content: str | None,
        *,
        document: Document,
        components: cabc.Sequence[typ.Any] = (),
        ephemeral: bool = False,
    ) -> MessageHandle: ...

    async def follow_up(
        self,
        content: str | None,
        *,
        document: Document,
        components: cabc.Sequence[typ.Any] = (),
        ephemeral: bool = False,
    ) -> MessageHandle: ...


__all__ = [
    "ChannelTarget",
    "InteractionTarget",
    "MessageDeletedError",
    "MessageHandle",
    "NavigationEvent",
    "TransportError",
    "Viewer",
]
