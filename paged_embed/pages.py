r"""Partition a content bundle into an ordered sequence of page records.

The builder works on private copies of the caller's collections. Each pass of
the loop pops up to ``items_per_page`` entries from the collection(s) selected
by the pagination mode, one colour, one image, and one thumbnail. Colours and
the targeted collection(s) keep the loop running; images and thumbnails do
not, so surplus images or thumbnails beyond the last page are discarded.

Example
-------
>>> from paged_embed.models import ContentSet, PaginationMode
>>> from paged_embed.pages import build_pages
>>> content = ContentSet.from_iterables(
...     colours=["#f00", "#0f0"], descriptions=["a", "b", "c", "d", "e"]
... )
>>> state = build_pages(content, PaginationMode.DESCRIPTION, 2)
>>> [page.descriptions for page in state.pages]
[('a', 'b'), ('c', 'd'), ('e',)]
>>> [page.colour for page in state.pages]
['#f00', '#0f0', '#0f0']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_COLOUR
from .models import (
    Colour,
    ContentSet,
    PageRecord,
    PaginationConfigError,
    PaginationMode,
)

logger = logging.getLogger(__name__)

T = typ.TypeVar("T")


@dc.dataclass(frozen=True, slots=True)
class PaginationState:
    """The pages derived from one content set.

    Attributes
    ----------
    pages : tuple[PageRecord, ...]
        Ordered page records; never empty.
    paginate : bool
        ``True`` when more than one page was produced and navigation controls
        should be attached.
    insufficient_content : bool
        ``True`` when the mode's required collection was missing and a single
        fallback page was built instead.
    """

    pages: tuple[PageRecord, ...]
    paginate: bool
    insufficient_content: bool = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page(self, number: int) -> PageRecord:
        """Return the page at the 1-based ``number``."""
        return self.pages[number - 1]

    def to_json(self) -> dict[str, dict[str, typ.Any]]:
        """Map each 1-based page number to its JSON-ready record."""
        return {str(index): page.to_dict() for index, page in enumerate(self.pages, 1)}


class _Carry(typ.Generic[T]):
    """Pop the next value from a queue, falling back to the last one produced."""

    __slots__ = ("_last", "_remaining")

    def __init__(self, values: tuple[T, ...] | None, default: T) -> None:
        self._remaining = list(values or ())
        self._last = default

    def __bool__(self) -> bool:
        return bool(self._remaining)

    def next(self) -> T:
        if self._remaining:
            self._last = self._remaining.pop(0)
        return self._last


def _take(queue: list[T] | None, count: int) -> tuple[T, ...] | None:
    if queue is None:
        return None
    taken = tuple(queue[:count])
    del queue[:count]
    return taken


def _has_items(values: tuple[typ.Any, ...] | None) -> bool:
    return bool(values)


def _is_insufficient(content: ContentSet, mode: PaginationMode) -> bool:
    match mode:
        case PaginationMode.FIELD:
            return not _has_items(content.fields)
        case PaginationMode.DESCRIPTION:
            return not _has_items(content.descriptions)
        case _:
            return not (
                _has_items(content.descriptions) or _has_items(content.fields)
            )


def _fallback_page(content: ContentSet) -> PageRecord:
    colours = content.colours or (DEFAULT_COLOUR,)
    return PageRecord(
        colour=colours[0],
        descriptions=content.descriptions,
        fields=content.fields,
        image=content.images[0] if content.images else None,
        thumbnail=content.thumbnails[0] if content.thumbnails else None,
    )


def build_pages(
    content: ContentSet,
    mode: PaginationMode | str,
    items_per_page: int,
) -> PaginationState:
    """Partition ``content`` into page records.

    Parameters
    ----------
    content : ContentSet
        Collections to paginate. They are copied, never mutated.
    mode : PaginationMode or str
        Which collection(s) are sliced per page. In single-target modes the
        other collection is passed unsliced to every page.
    items_per_page : int
        Maximum number of sliced items per page.

    Returns
    -------
    PaginationState
        The ordered pages and the ``paginate`` flag. When the mode's required
        collection is empty the state holds a single page built from whatever
        is available and ``insufficient_content`` is set.

    Raises
    ------
    PaginationConfigError
        If ``mode`` is unknown or ``items_per_page`` is not positive.
    """
    mode = PaginationMode.parse(mode)
    if items_per_page < 1:
        msg = f"items_per_page must be a positive integer, got {items_per_page!r}."
        raise PaginationConfigError(msg)

    if _is_insufficient(content, mode):
        logger.warning(
            "No content to paginate for %s pagination; building a single page.",
            mode.value,
        )
        return PaginationState(
            pages=(_fallback_page(content),),
            paginate=False,
            insufficient_content=True,
        )

    slice_descriptions = mode in (PaginationMode.DESCRIPTION, PaginationMode.BOTH)
    slice_fields = mode in (PaginationMode.FIELD, PaginationMode.BOTH)
    descriptions = (
        list(content.descriptions)
        if slice_descriptions and content.descriptions is not None
        else None
    )
    fields = (
        list(content.fields) if slice_fields and content.fields is not None else None
    )
    colours: _Carry[Colour] = _Carry(content.colours, DEFAULT_COLOUR)
    images: _Carry[str | None] = _Carry(content.images, None)
    thumbnails: _Carry[str | None] = _Carry(content.thumbnails, None)

    pages: list[PageRecord] = []
    while colours or descriptions or fields:
        page_descriptions = (
            _take(descriptions, items_per_page)
            if slice_descriptions
            else content.descriptions
        )
        page_fields = (
            _take(fields, items_per_page) if slice_fields else content.fields
        )
        pages.append(
            PageRecord(
                colour=colours.next(),
                descriptions=page_descriptions,
                fields=page_fields,
                image=images.next(),
                thumbnail=thumbnails.next(),
            )
        )

    logger.debug("Built %d page(s) using %s pagination.", len(pages), mode.value)
    return PaginationState(pages=tuple(pages), paginate=len(pages) > 1)


__all__ = ["PaginationState", "build_pages"]
