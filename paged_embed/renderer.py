"""Apply page records to a mutable display document.

The session and facade never build transport payloads themselves; they paint
a :class:`~paged_embed.models.PageRecord` onto an object implementing the
:class:`Document` protocol and hand that object to the transport.
:class:`EmbedDocument` is the in-memory document used by default.

Example
-------
>>> from paged_embed.models import ContentSet, PageRecord
>>> from paged_embed.renderer import EmbedDocument, apply_page
>>> document = EmbedDocument()
>>> record = PageRecord(colour="#fff", descriptions=("one", "two"))
>>> content = ContentSet.from_iterables(descriptions=["one", "two"])
>>> _ = apply_page(document, record, current=1, total=1, content=content)
>>> document.description
'one\\ntwo'
>>> document.footer.text
'Page 1 of 1'
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import functools
import typing as typ

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from ._constants import PAGE_LABEL_TEMPLATE
from .models import FooterOptions, PaginationConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Colour, ContentSet, EmbedField, PageRecord


@typ.runtime_checkable
class Document(typ.Protocol):
    """The subset of a display document the page renderer writes to."""

    @property
    def fields(self) -> cabc.Sequence[EmbedField]: ...

    def set_colour(self, colour: Colour | None) -> typ.Any: ...

    def set_footer(self, text: str, icon_url: str | None = None) -> typ.Any: ...

    def set_description(self, description: str | None) -> typ.Any: ...

    def splice_fields(
        self, index: int, delete_count: int, *fields: EmbedField
    ) -> typ.Any: ...

    def set_image(self, url: str | None) -> typ.Any: ...

    def set_thumbnail(self, url: str | None) -> typ.Any: ...


@dc.dataclass(slots=True)
class EmbedAuthor:
    name: str
    icon_url: str | None = None
    url: str | None = None


@dc.dataclass(slots=True)
class EmbedDocument:
    """Mutable embed holding metadata and the currently rendered page."""

    title: str | None = None
    url: str | None = None
    author: EmbedAuthor | None = None
    timestamp: dt.datetime | None = None
    colour: Colour | None = None
    description: str | None = None
    fields: list[EmbedField] = dc.field(default_factory=list)
    footer: FooterOptions | None = None
    image: str | None = None
    thumbnail: str | None = None
    files: list[typ.Any] = dc.field(default_factory=list)

    def set_title(self, title: str | None) -> EmbedDocument:
        self.title = title
        return self

    def set_url(self, url: str | None) -> EmbedDocument:
        self.url = url
        return self

    def set_author(
        self, name: str, icon_url: str | None = None, url: str | None = None
    ) -> EmbedDocument:
        self.author = EmbedAuthor(name=name, icon_url=icon_url, url=url)
        return self

    def set_timestamp(
        self, timestamp: dt.datetime | float | None = None
    ) -> EmbedDocument:
        """Set the timestamp, defaulting to now; numbers are epoch milliseconds."""
        match timestamp:
            case None:
                self.timestamp = dt.datetime.now(dt.UTC)
            case dt.datetime():
                self.timestamp = timestamp
            case _:
                self.timestamp = dt.datetime.fromtimestamp(timestamp / 1000, dt.UTC)
        return self

    def set_colour(self, colour: Colour | None) -> EmbedDocument:
        self.colour = colour
        return self

    def set_description(self, description: str | None) -> EmbedDocument:
        self.description = description
        return self

    def splice_fields(
        self, index: int, delete_count: int, *fields: EmbedField
    ) -> EmbedDocument:
        self.fields[index : index + delete_count] = list(fields)
        return self

    def set_footer(self, text: str, icon_url: str | None = None) -> EmbedDocument:
        self.footer = FooterOptions(text=text, icon_url=icon_url)
        return self

    def set_image(self, url: str | None) -> EmbedDocument:
        self.image = url
        return self

    def set_thumbnail(self, url: str | None) -> EmbedDocument:
        self.thumbnail = url
        return self

    def attach_files(self, files: cabc.Iterable[typ.Any]) -> EmbedDocument:
        self.files.extend(files)
        return self

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the payload handed to the message transport."""
        return {
            "title": self.title,
            "url": self.url,
            "author": dc.asdict(self.author) if self.author else None,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "colour": self.colour,
            "description": self.description,
            "fields": [field.to_dict() for field in self.fields],
            "footer": dc.asdict(self.footer) if self.footer else None,
            "image": self.image,
            "thumbnail": self.thumbnail,
        }


@functools.cache
def _footer_template(source: str) -> Template:
    env = Environment(autoescape=False, undefined=StrictUndefined)
    return env.from_string(source)


def format_page_label(template: str | None, current: int, total: int) -> str:
    """Return the footer text for page ``current`` of ``total``.

    Parameters
    ----------
    template : str or None
        Jinja template; ``{{ page }}`` receives ``"Page {current} of {total}"``
        and ``current``/``total`` are also available. ``None`` yields the
        label itself.
    current : int
        1-based page number.
    total : int
        Page count; values below one are shown as one.

    Raises
    ------
    PaginationConfigError
        If ``template`` does not parse or uses a name other than ``page``,
        ``current`` or ``total``. Literal braces need ``{% raw %}``.
    """
    total = max(total, 1)
    label = PAGE_LABEL_TEMPLATE.format(current=current, total=total)
    if template is None:
        return label
    try:
        return _footer_template(template).render(
            page=label, current=current, total=total
        )
    except TemplateError as exc:
        msg = f"Invalid footer template {template!r}: {exc}"
        raise PaginationConfigError(msg) from exc


def apply_page(
    document: Document,
    record: PageRecord,
    *,
    current: int,
    total: int,
    content: ContentSet,
    footer: FooterOptions | None = None,
) -> Document:
    """Paint ``record`` onto ``document`` and return the document.

    Descriptions and fields are only written when ``content`` configured them,
    so documents that never had a description keep their own. Applying the
    same record twice leaves the document unchanged.
    """
    footer = footer or FooterOptions()
    document.set_colour(record.colour)
    document.set_footer(
        format_page_label(footer.text, current, total), footer.icon_url
    )
    if content.descriptions is not None:
        document.set_description("\n".join(record.descriptions or ()))
    if content.fields is not None:
        document.splice_fields(0, len(document.fields), *(record.fields or ()))
    document.set_thumbnail(record.thumbnail)
    document.set_image(record.image)
    return document


__all__ = [
    "Document",
    "EmbedAuthor",
    "EmbedDocument",
    "apply_page",
    "format_page_label",
]
