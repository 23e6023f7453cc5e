"""Typed dataclasses describing an embed bundle loaded from YAML."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ

from ..embed import PaginatedEmbed
from ..models import EmbedOptions, PaginationConfigError

__all__ = ["AuthorConfig", "EmbedConfig", "PaginationConfigError"]


@dc.dataclass(slots=True)
class AuthorConfig:
    """Author line shown above the embed title."""

    name: str
    icon_url: str | None = None
    url: str | None = None


@dc.dataclass(slots=True)
class EmbedConfig:
    """Pagination options together with the embed's static metadata."""

    options: EmbedOptions
    title: str | None = None
    url: str | None = None
    author: AuthorConfig | None = None
    timestamp: dt.datetime | None = None

    def build(self, **kwargs: typ.Any) -> PaginatedEmbed:
        """Return a :class:`PaginatedEmbed` configured from this bundle."""
        embed = PaginatedEmbed(self.options, **kwargs)
        if self.title is not None:
            embed.set_title(self.title)
        if self.url is not None:
            embed.set_url(self.url)
        if self.author is not None:
            embed.set_author(self.author.name, self.author.icon_url, self.author.url)
        if self.timestamp is not None:
            embed.set_timestamp(self.timestamp)
        return embed
