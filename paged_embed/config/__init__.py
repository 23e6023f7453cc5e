"""Load and validate paginated embed bundles from YAML.

This subpackage parses an embed bundle file (colours, descriptions, fields,
images, thumbnails, page size, pagination mode, footer, and metadata) into an
:class:`EmbedConfig`. :func:`load_embed_config` is the primary entry point and
:meth:`EmbedConfig.build` turns the result into a ready
:class:`~paged_embed.embed.PaginatedEmbed`.

Examples
--------
>>> from pathlib import Path
>>> from paged_embed.config import load_embed_config
>>> config = load_embed_config(Path("embed.yaml"))  # doctest: +SKIP
>>> embed = config.build()  # doctest: +SKIP
>>> embed.to_json()["1"]["colour"]  # doctest: +SKIP
'#5865f2'
"""

from .loader import load_embed_config, parse_embed_config
from .models import AuthorConfig, EmbedConfig, PaginationConfigError

__all__ = [
    "AuthorConfig",
    "EmbedConfig",
    "PaginationConfigError",
    "load_embed_config",
    "parse_embed_config",
]
