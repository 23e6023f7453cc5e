"""Static HTML preview of every page of a paginated embed.

The preview paints each page onto a scratch :class:`EmbedDocument` with the
same :func:`~paged_embed.renderer.apply_page` used during navigation, converts
descriptions and field values from Discord-flavoured Markdown to HTML, and
renders ``templates/embed_preview.jinja``. It is an inspection aid; layout
fidelity with any chat client is not a goal.

>>> from paged_embed.preview import EmbedPreviewBuilder
>>> builder = EmbedPreviewBuilder(embed)  # doctest: +SKIP
>>> builder.run(Path("preview.html"))  # doctest: +SKIP
PosixPath('preview.html')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markdown import Markdown
from markdown.extensions import Extension

from .renderer import EmbedDocument, apply_page

if typ.TYPE_CHECKING:
    from .embed import PaginatedEmbed


class EscapeRawHtmlExtension(Extension):
    """Render raw HTML in Markdown source as text instead of passing it through.

    Embed content comes from whoever fills the bundle, so tags such as
    ``<script>`` must show up literally in the preview.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Drop the block and inline raw HTML handlers from ``md``."""
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


@dc.dataclass(slots=True)
class PreviewPage:
    """Rendered state of one page as handed to the template."""

    number: int
    document: EmbedDocument
    description_html: str
    field_html: list[tuple[str, str, bool]]


class EmbedPreviewBuilder:
    """Render all pages of a :class:`PaginatedEmbed` into one HTML file."""

    def __init__(
        self, embed: PaginatedEmbed, *, templates_dir: Path | None = None
    ) -> None:
        self.embed = embed
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("embed_preview.jinja")
        self._markdown = Markdown(
            extensions=["fenced_code", "sane_lists", EscapeRawHtmlExtension()]
        )

    def pages(self) -> list[PreviewPage]:
        """Paint every page onto its own copy of the embed's document."""
        embed = self.embed
        previews: list[PreviewPage] = []
        for number, record in enumerate(embed.pages, 1):
            document = dc.replace(embed.document, fields=list(embed.document.fields))
            apply_page(
                document,
                record,
                current=number,
                total=embed.page_count,
                content=embed.content,
                footer=embed.footer,
            )
            previews.append(
                PreviewPage(
                    number=number,
                    document=document,
                    description_html=self._to_html(document.description),
                    field_html=[
                        (field.name, self._to_html(field.value), field.inline)
                        for field in document.fields
                    ],
                )
            )
        return previews

    def render(self) -> str:
        """Return the preview HTML, terminated by a newline."""
        html = self.template.render(
            title=self.embed.document.title,
            pages=self.pages(),
            generated_at=dt.datetime.now(dt.UTC),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output: Path) -> Path:
        """Write the preview to ``output``, creating parent directories."""
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(), encoding="utf-8")
        return output

    def _to_html(self, text: str | None) -> str:
        if not text:
            return ""
        self._markdown.reset()
        return self._markdown.convert(text)


__all__ = ["EmbedPreviewBuilder", "EscapeRawHtmlExtension", "PreviewPage"]
