"""Tests for wren.content.frontmatter — YAML front-matter splitting."""

from wren.content.frontmatter import parse_front_matter


class TestParseFrontMatter:
    def test_metadata_and_body(self) -> None:
        payload = parse_front_matter("---\ntitle: Hello\ntags: [a, b]\n---\n\n# Body\n")

        assert payload.metadata == {"title": "Hello", "tags": ["a", "b"]}
        assert payload.content == "# Body"

    def test_no_front_matter(self) -> None:
        document = "# Just markdown\n\ntext"
        payload = parse_front_matter(document)

        assert payload.metadata == {}
        assert payload.content == document

    def test_crlf_line_endings(self) -> None:
        payload = parse_front_matter("---\r\ntitle: Hi\r\n---\r\nBody")

        assert payload.metadata == {"title": "Hi"}
        assert payload.content == "Body"

    def test_unclosed_block_is_body(self) -> None:
        document = "---\ntitle: Hi\nno closing fence"
        assert parse_front_matter(document).content == document

    def test_invalid_yaml_is_body(self) -> None:
        document = "---\ntitle: [unclosed\n---\nBody"
        payload = parse_front_matter(document)

        assert payload.metadata == {}
        assert payload.content == document

    def test_non_mapping_is_body(self) -> None:
        document = "---\n- a\n- b\n---\nBody"
        payload = parse_front_matter(document)

        assert payload.metadata == {}
        assert payload.content == document

    def test_empty_block(self) -> None:
        payload = parse_front_matter("---\n\n---\nBody")

        assert payload.metadata == {}
        assert payload.content == "Body"

    def test_dashes_inside_body_are_kept(self) -> None:
        payload = parse_front_matter("---\na: 1\n---\nintro\n---\nmore")
        assert payload.content == "intro\n---\nmore"
