"""Utility helpers shared by the embed bundle loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from ..models import EmbedField, FooterOptions, PaginationConfigError
from .models import AuthorConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(payload: typ.Mapping[str, typ.Any], key: str) -> list[str] | None:
    """Return ``payload[key]`` as a list of strings, or None when absent."""
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        msg = f"'{key}' must be a list, got {type(value).__name__}."
        raise PaginationConfigError(msg)
    return [str(item) for item in value]


def _colour_list(payload: typ.Mapping[str, typ.Any]) -> list[str | int] | None:
    """Return the configured colours, keeping integers as integers."""
    value = payload.get("colours", payload.get("colors"))
    if value is None:
        return None
    if not isinstance(value, list):
        msg = "'colours' must be a list."
        raise PaginationConfigError(msg)
    return [item if isinstance(item, int) else str(item) for item in value]


def _build_fields(value: object) -> list[EmbedField] | None:
    """Build field records from a list of ``{name, value, inline}`` mappings."""
    if value is None:
        return None
    if not isinstance(value, list):
        msg = "'fields' must be a list of mappings."
        raise PaginationConfigError(msg)
    fields: list[EmbedField] = []
    for position, entry in enumerate(value, 1):
        if not isinstance(entry, dict) or "name" not in entry or "value" not in entry:
            msg = f"Field #{position} must define 'name' and 'value'."
            raise PaginationConfigError(msg)
        fields.append(
            EmbedField(
                name=str(entry["name"]),
                value=str(entry["value"]),
                inline=bool(entry.get("inline", False)),
            )
        )
    return fields


def _build_footer(value: object) -> FooterOptions | None:
    match value:
        case None:
            return None
        case str() as text:
            return FooterOptions(text=text)
        case dict():
            return FooterOptions(
                text=_optional_str(value.get("text")),
                icon_url=_optional_str(value.get("icon_url")),
            )
        case _:
            msg = "'footer' must be a string or a mapping."
            raise PaginationConfigError(msg)


def _build_author(value: object) -> AuthorConfig | None:
    match value:
        case None:
            return None
        case str() as name:
            return AuthorConfig(name=name)
        case dict() if _optional_str(value.get("name")):
            return AuthorConfig(
                name=str(value["name"]).strip(),
                icon_url=_optional_str(value.get("icon_url")),
                url=_optional_str(value.get("url")),
            )
        case _:
            msg = "'author' must be a name or a mapping with a 'name'."
            raise PaginationConfigError(msg)


def _positive_int(value: object, key: str, *, required: bool) -> int | None:
    if value is None:
        if required:
            msg = f"Embed configuration is missing '{key}'."
            raise PaginationConfigError(msg)
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"'{key}' must be a positive integer, got {value!r}."
        raise PaginationConfigError(msg)
    return value


def _parse_timestamp(value: dt.datetime | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError as exc:
                msg = f"'timestamp' is not an ISO 8601 value: {text!r}."
                raise PaginationConfigError(msg) from exc
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "_build_author",
    "_build_fields",
    "_build_footer",
    "_colour_list",
    "_optional_str",
    "_parse_timestamp",
    "_positive_int",
    "_string_list",
]
