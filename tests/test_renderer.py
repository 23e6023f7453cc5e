"""Unit tests for painting page records onto the embed document."""

from __future__ import annotations

import dataclasses as dc

import pytest

from paged_embed import (
    ContentSet,
    Document,
    EmbedDocument,
    EmbedField,
    FooterOptions,
    PageRecord,
    PaginationConfigError,
    apply_page,
    format_page_label,
)


def test_page_label_defaults_to_plain_label() -> None:
    assert format_page_label(None, 2, 5) == "Page 2 of 5"


def test_page_label_never_reports_zero_pages() -> None:
    assert format_page_label(None, 1, 0) == "Page 1 of 1"


def test_page_label_template_substitutes_token() -> None:
    label = format_page_label("Results · {{ page }}", 1, 3)
    assert label == "Results · Page 1 of 3"


def test_page_label_template_without_token_is_used_verbatim() -> None:
    assert format_page_label("Static footer", 1, 3) == "Static footer"


def test_page_label_template_exposes_numbers() -> None:
    assert format_page_label("{{ current }}/{{ total }}", 2, 4) == "2/4"


def test_apply_page_writes_every_configured_part() -> None:
    fields = (EmbedField("a", "1"), EmbedField("b", "2", inline=True))
    content = ContentSet.from_iterables(descriptions=["x"], fields=list(fields))
    record = PageRecord(
        colour="#123456",
        descriptions=("one", "two"),
        fields=fields,
        image="https://img.invalid/1.png",
        thumbnail="https://img.invalid/t.png",
    )
    document = EmbedDocument(fields=[EmbedField("stale", "value")])

    apply_page(
        document,
        record,
        current=2,
        total=3,
        content=content,
        footer=FooterOptions(text="{{ page }}", icon_url="https://img.invalid/i.png"),
    )

    assert document.colour == "#123456"
    assert document.description == "one\ntwo"
    assert document.fields == list(fields)
    assert document.image == "https://img.invalid/1.png"
    assert document.thumbnail == "https://img.invalid/t.png"
    assert document.footer == FooterOptions(
        text="Page 2 of 3", icon_url="https://img.invalid/i.png"
    )


def test_apply_page_leaves_unconfigured_description_alone() -> None:
    content = ContentSet.from_iterables(fields=[EmbedField("a", "1")])
    record = PageRecord(colour="red", fields=(EmbedField("a", "1"),))
    document = EmbedDocument(description="hand written")

    apply_page(document, record, current=1, total=1, content=content)

    assert document.description == "hand written"


def test_apply_page_clears_image_when_record_has_none() -> None:
    content = ContentSet.from_iterables(descriptions=["a"])
    document = EmbedDocument(image="old.png", thumbnail="old-thumb.png")

    apply_page(
        document,
        PageRecord(colour="red", descriptions=("a",)),
        current=1,
        total=1,
        content=content,
    )

    assert document.image is None
    assert document.thumbnail is None


def test_apply_page_is_idempotent() -> None:
    """Applying the same record twice leaves the document unchanged."""
    content = ContentSet.from_iterables(
        descriptions=["a", "b"], fields=[EmbedField("f", "v")]
    )
    record = PageRecord(
        colour="red",
        descriptions=("a", "b"),
        fields=(EmbedField("f", "v"),),
        image="i.png",
    )
    document = EmbedDocument(title="Title")

    apply_page(document, record, current=1, total=2, content=content)
    first = dc.replace(document, fields=list(document.fields)).to_dict()
    apply_page(document, record, current=1, total=2, content=content)

    assert document.to_dict() == first


def test_document_timestamp_accepts_epoch_milliseconds() -> None:
    document = EmbedDocument().set_timestamp(0)
    assert document.timestamp is not None
    assert document.timestamp.year == 1970


@pytest.mark.parametrize("template", ["{# unfinished", "Hi {{ name }}", "{% if %}"])
def test_invalid_footer_template_is_a_config_error(template: str) -> None:
    with pytest.raises(PaginationConfigError, match="Invalid footer template"):
        format_page_label(template, 1, 2)


def test_literal_braces_survive_a_raw_block() -> None:
    label = format_page_label("{% raw %}{{ name }}{% endraw %} · {{ page }}", 1, 2)
    assert label == "{{ name }} · Page 1 of 2"


def test_apply_page_replaces_fields_on_any_document() -> None:
    """A document outside this package is spliced, not appended to."""

    class ListDocument:
        def __init__(self) -> None:
            self.fields: list[EmbedField] = [EmbedField("old", "1")]

        def set_colour(self, colour: object) -> None: ...

        def set_footer(self, text: str, icon_url: str | None = None) -> None: ...

        def set_description(self, description: str | None) -> None: ...

        def splice_fields(
            self, index: int, delete_count: int, *fields: EmbedField
        ) -> None:
            self.fields[index : index + delete_count] = list(fields)

        def set_image(self, url: str | None) -> None: ...

        def set_thumbnail(self, url: str | None) -> None: ...

    fields = (EmbedField("new", "2"),)
    content = ContentSet.from_iterables(fields=list(fields))
    document = ListDocument()
    record = PageRecord(colour="red", fields=fields)

    assert isinstance(document, Document)
    apply_page(document, record, current=1, total=1, content=content)
    apply_page(document, record, current=1, total=1, content=content)

    assert document.fields == list(fields)
