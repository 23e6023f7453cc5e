"""Paginated embed facade.

:class:`PaginatedEmbed` owns the content bundle, regenerates the page records
whenever that content changes, keeps the display document painted with the
current page, and on :meth:`PaginatedEmbed.send` transmits the document and
starts an :class:`~paged_embed.session.InteractionSession` when there is more
than one page to browse.

Example
-------
>>> from paged_embed import EmbedOptions, PaginatedEmbed
>>> embed = PaginatedEmbed(
...     EmbedOptions(
...         items_per_page=2,
...         pagination_type="description",
...         colours=["#5865f2"],
...         descriptions=["one", "two", "three"],
...     )
... ).set_title("Numbers")
>>> sorted(embed.to_json())
['1', '2']
>>> embed.document.footer.text
'Page 1 of 2'
>>> message = await embed.send(target=SendTarget(channel=channel))  # doctest: +SKIP
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_QUEUE_SIZE, NAVIGATION_CONTROLS
from .cursor import NavigationCursor
from .models import (
    ContentSet,
    EmbedField,
    FooterOptions,
    PaginationMode,
)
from .pages import PaginationState, build_pages
from .renderer import EmbedDocument, apply_page, format_page_label
from .session import InteractionSession, SessionState

if typ.TYPE_CHECKING:
    import datetime as dt

    from .models import Colour, EmbedOptions, PageRecord
    from .transport import ChannelTarget, InteractionTarget, MessageHandle

logger = logging.getLogger(__name__)


class SendTargetError(RuntimeError):
    """Raised when an embed cannot be transmitted to the requested target."""


@dc.dataclass(slots=True)
class SendTarget:
    """Where and how to transmit a paginated embed.

    Attributes
    ----------
    interaction : InteractionTarget | None
        Interaction to reply to; takes precedence over ``channel``.
    channel : ChannelTarget | None
        Channel to post into when no interaction is given.
    ephemeral : bool
        Ask the interaction to reply privately.
    follow_up : bool
        Send a follow-up instead of the initial interaction reply.
    components : Sequence
        Extra UI components transmitted alongside the embed.
    viewer_id : str | None
        Restrict navigation to this viewer. Defaults to the interaction's user.
    """

    interaction: InteractionTarget | None = None
    channel: ChannelTarget | None = None
    ephemeral: bool = False
    follow_up: bool = False
    components: cabc.Sequence[typ.Any] = ()
    viewer_id: str | None = None


class PaginatedEmbed:
    """Fluent builder that paginates content and drives navigation."""

    def __init__(
        self,
        options: EmbedOptions,
        *,
        document: EmbedDocument | None = None,
        queue_size: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        """Validate ``options``, build the pages, and render the first one.

        Parameters
        ----------
        options : EmbedOptions
            Content collections, page size, pagination mode, and timeouts.
        document : EmbedDocument, optional
            Document to paint pages onto; a blank one is created by default.
        queue_size : int, optional
            Capacity of the navigation session's event queue.

        Raises
        ------
        PaginationConfigError
            If the pagination type is unknown or ``items_per_page`` is not a
            positive integer, both raised before any page is built, or if the
            footer text is not a valid template.
        """
        self.mode = PaginationMode.parse(options.pagination_type)
        self.options = options
        self.document = document or EmbedDocument()
        self.session: InteractionSession | None = None
        self.message: MessageHandle | None = None
        self._queue_size = queue_size
        self._content = options.content()
        self._footer = options.resolved_footer()
        self._state = build_pages(self._content, self.mode, options.items_per_page)
        self.cursor = NavigationCursor(self._state.page_count)
        self._render_page(self.cursor.current)

    @property
    def content(self) -> ContentSet:
        return self._content

    @property
    def footer(self) -> FooterOptions:
        return self._footer

    @property
    def pages(self) -> tuple[PageRecord, ...]:
        return self._state.pages

    @property
    def page_count(self) -> int:
        return self._state.page_count

    @property
    def paginate(self) -> bool:
        return self._state.paginate

    @property
    def pagination(self) -> PaginationState:
        return self._state

    @property
    def state(self) -> SessionState:
        """Return where the embed is in its send/navigation lifecycle."""
        if self.session is not None:
            return self.session.state
        if self.message is not None:
            return SessionState.RENDERED
        return SessionState.BUILDING

    def to_json(self) -> dict[str, dict[str, typ.Any]]:
        """Map each 1-based page number to its page record for inspection."""
        return self._state.to_json()

    # Document metadata

    def set_title(self, title: str | None) -> PaginatedEmbed:
        self.document.set_title(title)
        return self

    def set_author(
        self, name: str, icon_url: str | None = None, url: str | None = None
    ) -> PaginatedEmbed:
        self.document.set_author(name, icon_url, url)
        return self

    def set_timestamp(
        self, timestamp: dt.datetime | float | None = None
    ) -> PaginatedEmbed:
        self.document.set_timestamp(timestamp)
        return self

    def set_url(self, url: str | None) -> PaginatedEmbed:
        self.document.set_url(url)
        return self

    def attach_files(self, files: cabc.Iterable[typ.Any]) -> PaginatedEmbed:
        self.document.attach_files(files)
        return self

    def set_footer(
        self, text: str | None, icon_url: str | None = None
    ) -> PaginatedEmbed:
        """Replace the footer template (``{{ page }}`` marks the page label).

        Raises
        ------
        PaginationConfigError
            If ``text`` is not a valid footer template.
        """
        format_page_label(text, self.cursor.current, self.page_count)
        self._footer = FooterOptions(text=text, icon_url=icon_url)
        self._refresh()
        return self

    # Paginated content

    def set_descriptions(self, descriptions: cabc.Iterable[str]) -> PaginatedEmbed:
        return self._update_content(descriptions=tuple(descriptions))

    def set_fields(self, fields: cabc.Iterable[EmbedField]) -> PaginatedEmbed:
        return self._update_content(fields=tuple(fields))

    def set_colours(self, colours: cabc.Iterable[Colour]) -> PaginatedEmbed:
        return self._update_content(colours=tuple(colours))

    def set_images(self, images: cabc.Iterable[str]) -> PaginatedEmbed:
        return self._update_content(images=tuple(images))

    def set_thumbnails(self, thumbnails: cabc.Iterable[str]) -> PaginatedEmbed:
        return self._update_content(thumbnails=tuple(thumbnails))

    def splice_fields(
        self, index: int, delete_count: int, *replacement: EmbedField
    ) -> PaginatedEmbed:
        """Remove ``delete_count`` fields at ``index`` and insert ``replacement``."""
        fields = list(self._content.fields or ())
        fields[index : index + delete_count] = replacement
        return self._update_content(fields=tuple(fields))

    async def send(
        self, message: str | None = None, *, target: SendTarget
    ) -> MessageHandle:
        """Transmit the embed and start navigation when there are several pages.

        Parameters
        ----------
        message : str, optional
            Plain text sent alongside the embed.
        target : SendTarget
            Interaction or channel to transmit to.

        Returns
        -------
        MessageHandle
            The transmitted message.

        Raises
        ------
        SendTargetError
            If neither target is usable, the interaction cannot be replied to,
            or a previous send is still listening for navigation.
        TransportError
            If transmitting the message or attaching the controls fails.
        """
        if self.session is not None and self.session.active:
            msg = "This embed is already listening for navigation; stop it first."
            raise SendTargetError(msg)
        handle, viewer_id = await self._transmit(message, target)
        self.message = handle
        if self.page_count < 2:
            logger.debug("Single page embed sent; navigation not attached.")
            return handle

        for control in NAVIGATION_CONTROLS:
            await handle.add_reaction(control)
        self.session = InteractionSession(
            handle,
            self.cursor,
            self._render_page,
            viewer_id=viewer_id,
            idle_timeout=self.options.idle_timeout,
            queue_size=self._queue_size,
        )
        self.session.start(handle.events())
        return handle

    async def _transmit(
        self, message: str | None, target: SendTarget
    ) -> tuple[MessageHandle, str | None]:
        if target.interaction is not None:
            interaction = target.interaction
            if not interaction.is_repliable():
                msg = "The interaction cannot be replied to."
                raise SendTargetError(msg)
            send = interaction.follow_up if target.follow_up else interaction.reply
            handle = await send(
                message,
                document=self.document,
                components=target.components,
                ephemeral=target.ephemeral,
            )
            return handle, target.viewer_id or interaction.user.id
        if target.channel is not None:
            handle = await target.channel.send(
                message, document=self.document, components=target.components
            )
            return handle, target.viewer_id
        msg = "A channel or interaction is required to send a paginated embed."
        raise SendTargetError(msg)

    def _update_content(self, **changes: typ.Any) -> PaginatedEmbed:
        self._content = dc.replace(self._content, **changes)
        self._state = build_pages(
            self._content, self.mode, self.options.items_per_page
        )
        if self.session is not None and self.session.active:
            self.session.resync(self._state.page_count)
            return self
        self.cursor.clamp_to_count(self._state.page_count)
        self._render_page(self.cursor.current)
        return self

    def _refresh(self) -> None:
        if self.session is None or not self.session.active:
            self._render_page(self.cursor.current)

    def _render_page(self, number: int) -> EmbedDocument:
        apply_page(
            self.document,
            self._state.page(number),
            current=number,
            total=self._state.page_count,
            content=self._content,
            footer=self._footer,
        )
        return self.document


__all__ = ["PaginatedEmbed", "SendTarget", "SendTargetError"]
