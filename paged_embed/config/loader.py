"""Load embed bundle YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ..models import EmbedOptions, PaginationMode
from .helpers import (
    _build_author,
    _build_fields,
    _build_footer,
    _colour_list,
    _optional_str,
    _parse_timestamp,
    _positive_int,
    _string_list,
)
from .models import EmbedConfig


def load_embed_config(path: Path) -> EmbedConfig:
    """Load the YAML file describing one paginated embed.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML bundle (for example, ``embed.yaml``).

    Returns
    -------
    EmbedConfig
        Pagination options plus title, URL, author, and timestamp metadata.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    PaginationConfigError
        If required keys are missing or a value has the wrong shape, including
        an unknown ``pagination_type``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from paged_embed.config import load_embed_config
    >>> config = load_embed_config(Path("embed.yaml"))  # doctest: +SKIP
    >>> config.build().page_count  # doctest: +SKIP
    3
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return parse_embed_config(loaded)


def parse_embed_config(raw: typ.Mapping[str, typ.Any]) -> EmbedConfig:
    """Build an :class:`EmbedConfig` from an already parsed mapping."""
    items_per_page = _positive_int(
        raw.get("items_per_page"), "items_per_page", required=True
    )
    pagination_type = PaginationMode.parse(str(raw.get("pagination_type", "")))
    options = EmbedOptions(
        items_per_page=typ.cast("int", items_per_page),
        pagination_type=pagination_type,
        colours=_colour_list(raw),
        descriptions=_string_list(raw, "descriptions"),
        fields=_build_fields(raw.get("fields")),
        images=_string_list(raw, "images"),
        thumbnails=_string_list(raw, "thumbnails"),
        duration=_positive_int(raw.get("duration"), "duration", required=False),
        footer=_build_footer(raw.get("footer")),
    )
    return EmbedConfig(
        options=options,
        title=_optional_str(raw.get("title")),
        url=_optional_str(raw.get("url")),
        author=_build_author(raw.get("author")),
        timestamp=_parse_timestamp(raw.get("timestamp")),
    )


__all__ = ["load_embed_config", "parse_embed_config"]
