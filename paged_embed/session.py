"""Navigation session driving page changes from reaction events.

An :class:`InteractionSession` owns the :class:`NavigationCursor` of one
transmitted message. Incoming events are filtered by :func:`is_accepted`,
queued on a bounded per-session :class:`asyncio.Queue`, and drained by a
single consumer task strictly in arrival order, so each wrap-around step sees
the cursor value left by the previous event.

The session ends when no accepted event arrives within the idle timeout, when
the message is deleted, when the event stream finishes or fails, or when
:meth:`InteractionSession.stop` is called.
Removing the navigation controls on the way out is best effort: failures are
logged and never propagated, and the step is skipped for deleted messages.

Example
-------
>>> import asyncio
>>> from paged_embed.cursor import NavigationCursor
>>> from paged_embed.session import InteractionSession
>>> async def demo(message, render):  # doctest: +SKIP
...     session = InteractionSession(
...         message, NavigationCursor(3), render, idle_timeout=60
...     )
...     session.start(message.events())
...     await session.wait_closed()
"""

from __future__ import annotations

import asyncio
import enum
import logging
import typing as typ

from ._constants import DEFAULT_QUEUE_SIZE, NAVIGATION_CONTROLS, NEXT, PREVIOUS
from .transport import MessageDeletedError, TransportError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .cursor import NavigationCursor
    from .renderer import Document
    from .transport import MessageHandle, NavigationEvent

logger = logging.getLogger(__name__)

RenderCallback = typ.Callable[[int], "Document"]


class SessionState(enum.StrEnum):
    """Lifecycle of a paginated message."""

    BUILDING = "building"
    RENDERED = "rendered"
    LISTENING = "listening"
    ENDED = "ended"


def is_accepted(event: NavigationEvent, viewer_id: str | None) -> bool:
    """Return whether ``event`` may move the cursor.

    Only the two navigation controls count, bots are always ignored, and a
    session bound to ``viewer_id`` ignores everybody else.
    """
    if event.action not in NAVIGATION_CONTROLS or event.viewer.bot:
        return False
    return viewer_id is None or event.viewer.id == viewer_id


class InteractionSession:
    """Serialize navigation events for one message and re-render its pages."""

    def __init__(
        self,
        message: MessageHandle,
        cursor: NavigationCursor,
        render: RenderCallback,
        *,
        viewer_id: str | None = None,
        idle_timeout: float | None = None,
        queue_size: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        """Bind the session to a transmitted message.

        Parameters
        ----------
        message : MessageHandle
            The transmitted message to edit and clean up.
        cursor : NavigationCursor
            Cursor owned by the session from now on.
        render : RenderCallback
            Paints the given 1-based page onto the document and returns it.
        viewer_id : str, optional
            Only this viewer may navigate; ``None`` accepts any human viewer.
        idle_timeout : float, optional
            Seconds without an accepted event before the session ends.
        queue_size : int, optional
            Capacity of the pending event queue.
        """
        self.message = message
        self.cursor = cursor
        self.viewer_id = viewer_id
        self.idle_timeout = idle_timeout
        self.state = SessionState.RENDERED
        self.end_reason: str | None = None
        self._render = render
        self._queue: asyncio.Queue[NavigationEvent] = asyncio.Queue(queue_size)
        self._consumer: asyncio.Task[None] | None = None
        self._pump: asyncio.Task[None] | None = None
        self._closed = asyncio.Event()

    @property
    def active(self) -> bool:
        return self.state is SessionState.LISTENING

    def start(
        self, events: cabc.AsyncIterable[NavigationEvent] | None = None
    ) -> None:
        """Begin listening, optionally forwarding ``events`` into the queue.

        Raises
        ------
        RuntimeError
            If the session was already started.
        """
        if self.state is not SessionState.RENDERED:
            msg = f"Cannot start a session in state {self.state.value!r}."
            raise RuntimeError(msg)
        self.state = SessionState.LISTENING
        self._consumer = asyncio.create_task(self._consume())
        if events is not None:
            self._pump = asyncio.create_task(self._forward(events))
        logger.info(
            "Listening for navigation on %d page(s) (viewer=%s, idle_timeout=%s).",
            self.cursor.page_count,
            self.viewer_id or "any",
            self.idle_timeout,
        )

    async def submit(self, event: NavigationEvent) -> bool:
        """Queue ``event`` if the session is listening and accepts it."""
        if not self.active:
            logger.debug(
                "Dropping %s from %s: session not listening.",
                event.action,
                event.viewer.id,
            )
            return False
        if not is_accepted(event, self.viewer_id):
            logger.debug("Rejected %s from %s.", event.action, event.viewer.id)
            return False
        await self._queue.put(event)
        return True

    def resync(self, page_count: int) -> None:
        """Adopt a regenerated page count before the next event is handled."""
        current = self.cursor.clamp_to_count(page_count)
        logger.debug("Resynced cursor to page %d of %d.", current, page_count)

    async def join(self) -> None:
        """Wait until every queued event has been handled."""
        await self._queue.join()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def stop(
        self, reason: str = "stopped", *, message_deleted: bool = False
    ) -> None:
        """End the session and release the event subscription.

        Parameters
        ----------
        reason : str, optional
            Recorded on :attr:`end_reason`.
        message_deleted : bool, optional
            Skip removing the navigation controls because the message is gone.
        """
        if self.state is SessionState.ENDED:
            return
        self.state = SessionState.ENDED
        self.end_reason = reason
        current = asyncio.current_task()
        pending = [
            task
            for task in (self._consumer, self._pump)
            if task is not None and task is not current and not task.done()
        ]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        self._discard_pending()
        if not message_deleted:
            await self._remove_controls()
        self._closed.set()
        logger.info("Navigation session ended (%s).", reason)

    async def _forward(self, events: cabc.AsyncIterable[NavigationEvent]) -> None:
        try:
            async for event in events:
                await self.submit(event)
        except MessageDeletedError:
            await self.stop("message_deleted", message_deleted=True)
            return
        except TransportError as exc:
            logger.warning("Navigation event stream failed: %s", exc)
            await self.stop("events_failed")
            return
        await self._queue.join()
        await self.stop("events_closed")

    async def _consume(self) -> None:
        while self.active:
            try:
                event = await asyncio.wait_for(self._queue.get(), self.idle_timeout)
            except TimeoutError:
                await self.stop("idle")
                return
            try:
                await self._handle(event)
            except MessageDeletedError:
                await self.stop("message_deleted", message_deleted=True)
                return
            except Exception:
                logger.exception("Failed to update page %d.", self.cursor.current)
            finally:
                self._queue.task_done()

    async def _handle(self, event: NavigationEvent) -> None:
        if self.cursor.page_count < 2:
            self.cursor.reset()
        elif event.action == NEXT:
            self.cursor.wrap_next()
        elif event.action == PREVIOUS:
            self.cursor.wrap_prev()
        document = self._render(self.cursor.current)
        await self.message.edit(document)
        await self._acknowledge(event)

    async def _acknowledge(self, event: NavigationEvent) -> None:
        try:
            await self.message.remove_reaction(event.action, event.viewer)
        except TransportError as exc:
            logger.warning("Could not remove %s reaction: %s", event.action, exc)

    async def _remove_controls(self) -> None:
        try:
            await self.message.clear_reactions()
        except MessageDeletedError:
            logger.debug("Message already deleted; controls not removed.")
        except TransportError as exc:
            logger.warning("Could not remove navigation controls: %s", exc)

    def _discard_pending(self) -> None:
        while not self._queue.empty():
            self._queue.get_nowait()
            self._queue.task_done()


__all__ = ["InteractionSession", "SessionState", "is_accepted"]
