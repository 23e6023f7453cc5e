"""Cyclopts CLI entrypoint for inspecting paginated embed bundles.

The ``embed-pages`` console script loads an embed bundle from YAML, runs the
page builder, and either prints the page snapshot as JSON or writes an HTML
preview of every page. It is meant for checking how a bundle will split into
pages before wiring it to a bot.

Examples
--------
Print the page snapshot for a bundle:

>>> from paged_embed.cli import app
>>> app(["pages", "--config", "embed.yaml"])  # doctest: +SKIP

Write a preview next to the bundle:

>>> app(
...     ["preview", "--config", "embed.yaml", "--output", "preview.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._logging import configure_logging
from .config import load_embed_config
from .preview import EmbedPreviewBuilder

DEFAULT_CONFIG = Path("embed.yaml")
DEFAULT_OUTPUT = Path("preview.html")

app = App(name="embed-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to the embed bundle", env_var="INPUT_CONFIG")
]
LogLevelOption = typ.Annotated[
    str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Print the pages a bundle splits into as JSON.")
def pages(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    indent: int = 2,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Print the ``to_json`` snapshot of the configured embed.

    Parameters
    ----------
    config : Path, optional
        Embed bundle YAML (overridable via ``INPUT_CONFIG``).
    indent : int, optional
        JSON indentation.
    log_level : str, optional
        Logging level for ``paged_embed`` diagnostics.
    """
    configure_logging(log_level)
    embed = load_embed_config(config).build()
    print(json.dumps(embed.to_json(), indent=indent, ensure_ascii=False))


@app.command(help="Write an HTML preview of every page in a bundle.")
def preview(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the preview", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Render the configured embed to a static HTML preview.

    Parameters
    ----------
    config : Path, optional
        Embed bundle YAML (overridable via ``INPUT_CONFIG``).
    output : Path, optional
        Destination HTML file; parent directories are created.
    log_level : str, optional
        Logging level for ``paged_embed`` diagnostics.
    """
    configure_logging(log_level)
    embed = load_embed_config(config).build()
    written = EmbedPreviewBuilder(embed).run(output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers ``embed-pages``."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
