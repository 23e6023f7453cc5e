"""Typed dataclasses describing paginated embed content and options."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ

Colour = str | int


class PaginationConfigError(ValueError):
    """Raised when pagination options are invalid or incomplete."""


class PaginationMode(enum.StrEnum):
    """Select which collection(s) are sliced across pages."""

    DESCRIPTION = "description"
    FIELD = "field"
    BOTH = "both"

    @classmethod
    def parse(cls, value: str | PaginationMode) -> PaginationMode:
        """Return the mode for ``value`` or raise ``PaginationConfigError``."""
        try:
            return cls(value)
        except ValueError as exc:
            valid = ", ".join(mode.value for mode in cls)
            msg = (
                f"An invalid pagination type has been passed: {value!r}. "
                f"Valid pagination types: {valid}."
            )
            raise PaginationConfigError(msg) from exc


@dc.dataclass(frozen=True, slots=True)
class EmbedField:
    """A single name/value record shown in the embed's field list."""

    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> dict[str, typ.Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dc.dataclass(frozen=True, slots=True)
class FooterOptions:
    """Footer template and icon.

    Attributes
    ----------
    text : str | None
        Jinja template for the footer; ``{{ page }}`` receives the page label.
        When ``None`` the page label is used verbatim.
    icon_url : str | None
        Icon shown beside the footer text.
    """

    text: str | None = None
    icon_url: str | None = None


def _freeze(values: cabc.Iterable[typ.Any] | None) -> tuple[typ.Any, ...] | None:
    if values is None:
        return None
    return tuple(values)


@dc.dataclass(frozen=True, slots=True)
class ContentSet:
    """The caller-supplied bundle of content to paginate.

    ``None`` marks a collection that was never configured; an empty tuple is a
    configured but empty collection. The distinction decides whether the
    renderer touches the document's description and field list at all.
    """

    colours: tuple[Colour, ...] | None = None
    descriptions: tuple[str, ...] | None = None
    fields: tuple[EmbedField, ...] | None = None
    images: tuple[str, ...] | None = None
    thumbnails: tuple[str, ...] | None = None

    @classmethod
    def from_iterables(
        cls,
        *,
        colours: cabc.Iterable[Colour] | None = None,
        descriptions: cabc.Iterable[str] | None = None,
        fields: cabc.Iterable[EmbedField] | None = None,
        images: cabc.Iterable[str] | None = None,
        thumbnails: cabc.Iterable[str] | None = None,
    ) -> ContentSet:
        """Snapshot caller-owned sequences into an immutable content set."""
        return cls(
            colours=_freeze(colours),
            descriptions=_freeze(descriptions),
            fields=_freeze(fields),
            images=_freeze(images),
            thumbnails=_freeze(thumbnails),
        )


@dc.dataclass(frozen=True, slots=True)
class PageRecord:
    """One fully assembled page.

    Attributes
    ----------
    colour : Colour
        Accent colour for the page; always present.
    descriptions : tuple[str, ...] | None
        Text blocks shown on this page, or ``None`` when none were configured.
    fields : tuple[EmbedField, ...] | None
        Field records shown on this page, or ``None`` when none were configured.
    image : str | None
        Image reference for the page.
    thumbnail : str | None
        Thumbnail reference for the page.
    """

    colour: Colour
    descriptions: tuple[str, ...] | None = None
    fields: tuple[EmbedField, ...] | None = None
    image: str | None = None
    thumbnail: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the page content."""
        return {
            "colour": self.colour,
            "descriptions": (
                list(self.descriptions) if self.descriptions is not None else None
            ),
            "fields": (
                [field.to_dict() for field in self.fields]
                if self.fields is not None
                else None
            ),
            "image": self.image,
            "thumbnail": self.thumbnail,
        }


@dc.dataclass(slots=True)
class EmbedOptions:
    """Constructor options for :class:`~paged_embed.embed.PaginatedEmbed`.

    Attributes
    ----------
    items_per_page : int
        Maximum number of sliced items per page; must be positive.
    pagination_type : str | PaginationMode
        ``"description"``, ``"field"`` or ``"both"``.
    colours, descriptions, fields, images, thumbnails : list | None
        Content collections; ``None`` when not configured.
    duration : int | None
        Idle timeout of the navigation session in milliseconds.
    footer : FooterOptions | None
        Footer template and icon.
    footer_image_url : str | None
        Footer icon, kept for callers that predate ``footer``.
    """

    items_per_page: int
    pagination_type: str | PaginationMode
    colours: list[Colour] | None = None
    descriptions: list[str] | None = None
    fields: list[EmbedField] | None = None
    images: list[str] | None = None
    thumbnails: list[str] | None = None
    duration: int | None = None
    footer: FooterOptions | None = None
    footer_image_url: str | None = None

    @property
    def idle_timeout(self) -> float | None:
        """Return the idle timeout in seconds, or ``None`` when unset."""
        if self.duration is None:
            return None
        return self.duration / 1000

    def resolved_footer(self) -> FooterOptions:
        """Return the footer options with the legacy icon folded in."""
        footer = self.footer or FooterOptions()
        if footer.icon_url is None and self.footer_image_url:
            return dc.replace(footer, icon_url=self.footer_image_url)
        return footer

    def content(self) -> ContentSet:
        return ContentSet.from_iterables(
            colours=self.colours,
            descriptions=self.descriptions,
            fields=self.fields,
            images=self.images,
            thumbnails=self.thumbnails,
        )


__all__ = [
    "Colour",
    "ContentSet",
    "EmbedField",
    "EmbedOptions",
    "FooterOptions",
    "PageRecord",
    "PaginationConfigError",
    "PaginationMode",
]
