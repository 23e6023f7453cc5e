"""Split embed content into pages and let a viewer browse them.

:class:`PaginatedEmbed` takes colours, descriptions, fields, images, and
thumbnails, partitions them into page records, and after
:meth:`~PaginatedEmbed.send` reacts to the previous/next controls through an
:class:`InteractionSession` until the session idles out or the message is
deleted.

Exports
-------
- ``PaginatedEmbed``: Fluent facade around page building and navigation.
- ``EmbedOptions``: Constructor options.
- ``build_pages``: The page builder on its own.
- ``app``/``main``: The ``embed-pages`` console script.

Examples
--------
>>> from paged_embed import EmbedField, EmbedOptions, PaginatedEmbed
>>> embed = PaginatedEmbed(
...     EmbedOptions(
...         items_per_page=2,
...         pagination_type="field",
...         fields=[EmbedField(str(n), "value") for n in range(5)],
...     )
... )
>>> embed.page_count
3
"""

from __future__ import annotations

from ._constants import DEFAULT_COLOUR, NAVIGATION_CONTROLS, NEXT, PREVIOUS
from .cli import app, main
from .cursor import NavigationCursor
from .embed import PaginatedEmbed, SendTarget, SendTargetError
from .models import (
    ContentSet,
    EmbedField,
    EmbedOptions,
    FooterOptions,
    PageRecord,
    PaginationConfigError,
    PaginationMode,
)
from .pages import PaginationState, build_pages
from .renderer import Document, EmbedDocument, apply_page, format_page_label
from .session import InteractionSession, SessionState, is_accepted
from .transport import (
    MessageDeletedError,
    NavigationEvent,
    TransportError,
    Viewer,
)

__all__ = [
    "DEFAULT_COLOUR",
    "NAVIGATION_CONTROLS",
    "NEXT",
    "PREVIOUS",
    "ContentSet",
    "Document",
    "EmbedDocument",
    "EmbedField",
    "EmbedOptions",
    "FooterOptions",
    "InteractionSession",
    "MessageDeletedError",
    "NavigationCursor",
    "NavigationEvent",
    "PageRecord",
    "PaginatedEmbed",
    "PaginationConfigError",
    "PaginationMode",
    "PaginationState",
    "SendTarget",
    "SendTargetError",
    "SessionState",
    "TransportError",
    "Viewer",
    "app",
    "apply_page",
    "build_pages",
    "format_page_label",
    "is_accepted",
    "main",
]
