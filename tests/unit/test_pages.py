"""Unit tests for markdown content pages."""

import pytest

from folio.contexts.content.exceptions import ContentLoadError
from folio.contexts.content.pages import load_pages, parse_content_page, split_front_matter


@pytest.mark.unit
def test_split_front_matter():
    meta, body = split_front_matter("---\ntitle: Hi\n---\nBody text\n")
    assert meta == "title: Hi"
    assert body == "Body text"


@pytest.mark.unit
def test_split_front_matter_without_block():
    text = "# Heading\n\nBody"
    assert split_front_matter(text) == ("", text)


@pytest.mark.unit
def test_split_front_matter_unclosed_block_is_body():
    text = "---\ntitle: Hi\nno closing line"
    assert split_front_matter(text) == ("", text)


@pytest.mark.unit
def test_parse_page_with_front_matter(tmp_path):
    path = tmp_path / "uses.md"
    path.write_text("---\ntitle: Uses\ndescription: My setup\norder: 2\n---\nSome **bold** text.\n")

    page = parse_content_page(path)

    assert page.slug == "uses"
    assert page.title == "Uses"
    assert page.description == "My setup"
    assert page.order == 2
    assert "<strong>bold</strong>" in page.html
    assert not page.draft


@pytest.mark.unit
def test_title_falls_back_to_heading_then_slug(tmp_path):
    heading = tmp_path / "now.md"
    heading.write_text("# What I'm doing now\n\nLearning Go.\n")
    plain = tmp_path / "side-notes.md"
    plain.write_text("Just text.\n")

    heading_page = parse_content_page(heading)
    assert heading_page.title == "What I'm doing now"
    # The heading is not rendered twice
    assert "<h1>" not in heading_page.html

    assert parse_content_page(plain).title == "Side Notes"


@pytest.mark.unit
def test_markdown_extensions_are_applied(tmp_path):
    path = tmp_path / "table.md"
    path.write_text("| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert "<table>" in parse_content_page(path, extensions=["tables"]).html
    assert "<table>" not in parse_content_page(path, extensions=[]).html


@pytest.mark.unit
def test_unknown_front_matter_key_rejected(tmp_path):
    path = tmp_path / "bad.md"
    path.write_text("---\ntitle: Bad\nlayout: wide\n---\nText\n")
    with pytest.raises(ContentLoadError):
        parse_content_page(path)


@pytest.mark.unit
def test_non_mapping_front_matter_rejected(tmp_path):
    path = tmp_path / "bad.md"
    path.write_text("---\n- a\n- b\n---\nText\n")
    with pytest.raises(ContentLoadError):
        parse_content_page(path)


@pytest.mark.unit
def test_load_pages_sorts_and_skips_drafts(tmp_path):
    (tmp_path / "b.md").write_text("---\norder: 1\n---\nB\n")
    (tmp_path / "a.md").write_text("---\norder: 5\n---\nA\n")
    (tmp_path / "c.md").write_text("---\ndraft: true\n---\nC\n")
    (tmp_path / "notes.txt").write_text("ignored")

    pages = load_pages(tmp_path)

    assert [page.slug for page in pages] == ["b", "a"]


@pytest.mark.unit
def test_load_pages_missing_directory(tmp_path):
    assert load_pages(tmp_path / "nope") == ()


@pytest.mark.unit
def test_unknown_front_matter_with_mixed_key_types_rejected(tmp_path):
    path = tmp_path / "bad.md"
    path.write_text("---\n1: a\nlayout: wide\n---\nText\n")
    with pytest.raises(ContentLoadError):
        parse_content_page(path)


@pytest.mark.unit
@pytest.mark.parametrize("draft", ['"false"', '"yes"', "1"])
def test_draft_must_be_boolean(tmp_path, draft):
    path = tmp_path / "post.md"
    path.write_text(f"---\ndraft: {draft}\n---\nText\n")
    with pytest.raises(ContentLoadError, match="draft"):
        parse_content_page(path)


@pytest.mark.unit
def test_draft_false_page_is_loaded(tmp_path):
    (tmp_path / "post.md").write_text("---\ndraft: false\n---\nText\n")
    assert [page.slug for page in load_pages(tmp_path)] == ["post"]


@pytest.mark.unit
def test_repository_front_matter(tmp_path):
    path = tmp_path / "planner.md"
    path.write_text("---\nrepository: route-planner\n---\nHow it works.\n")
    plain = tmp_path / "plain.md"
    plain.write_text("Text\n")

    assert parse_content_page(path).repository == "route-planner"
    assert parse_content_page(plain).repository is None
