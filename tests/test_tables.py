"""Tests for the lookup tables."""

import pytest

from slate_serializer.formatting import DEFAULT_TABLES, LookupTables


class TestLookupTables:
    """Tests for the LookupTables class."""

    def test_type_for_plain_tag(self):
        """Test forward lookup of a bare tag."""
        assert DEFAULT_TABLES.type_for("li") == "list-item"

    def test_type_for_with_type_attribute(self):
        """Test that the type attribute is appended to the key."""
        assert DEFAULT_TABLES.type_for("ol", "a") == "alpha-ordered-list"
        assert DEFAULT_TABLES.type_for("ol", "1") == "ordered-list"

    def test_type_for_miss_falls_back(self):
        """Test that unknown keys resolve to the paragraph entry."""
        assert DEFAULT_TABLES.type_for("blink") == "paragraph"
        assert DEFAULT_TABLES.type_for("ul", "disc") == "paragraph"

    def test_tag_for_first_declared_wins(self):
        """Test that shared types reverse to their first table entry."""
        assert DEFAULT_TABLES.tag_for("ordered-list") == "ol1"
        assert DEFAULT_TABLES.tag_for("paragraph") == "p"

    def test_tag_for_follows_declaration_order(self):
        """Test that reordering the table changes the reverse lookup."""
        tables = LookupTables.create(elements={"p": "paragraph", "div": "box", "section": "box"})
        assert tables.tag_for("box") == "div"

        tables = LookupTables.create(elements={"p": "paragraph", "section": "box", "div": "box"})
        assert tables.tag_for("box") == "section"

    def test_tag_for_unknown_type(self):
        """Test that unknown types resolve to the fallback tag."""
        assert DEFAULT_TABLES.tag_for("mystery") == "p"

    def test_mark_for(self):
        """Test mark lookups."""
        assert DEFAULT_TABLES.mark_for("em") == "italic"
        assert DEFAULT_TABLES.mark_for("strong") == "bold"
        assert DEFAULT_TABLES.mark_for("span") is None
        assert DEFAULT_TABLES.mark_for(None) is None

    def test_classification(self):
        """Test block and inline membership."""
        assert DEFAULT_TABLES.is_block("td")
        assert not DEFAULT_TABLES.is_block("a")
        assert DEFAULT_TABLES.is_inline("a")
        assert not DEFAULT_TABLES.is_inline(None)

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("ola", ("ol", "a")),
            ("ol1", ("ol", "1")),
            ("ol", ("ol", None)),
            ("td", ("td", None)),
            ("p", ("p", None)),
            ("ul", ("ul", None)),
        ],
    )
    def test_split_variant(self, key, expected):
        """Test splitting discriminated tag keys."""
        assert DEFAULT_TABLES.split_variant(key) == expected

    def test_split_variant_ignores_undeclared_keys(self):
        """Test that a key whose prefix is another table key is not split."""
        tables = LookupTables.create(elements={"p": "paragraph", "h": "header", "h1": "heading"})

        assert tables.split_variant("h1") == ("h1", None)
        assert tables.split_variant("ola") == ("ol", "a")

    def test_custom_variant_elements(self):
        """Test that the variant list can be overridden."""
        tables = LookupTables.create(
            elements={"p": "paragraph", "ul": "list", "uld": "disc-list"},
            variant_elements=["uld"],
        )

        assert tables.split_variant("uld") == ("ul", "d")
        assert tables.split_variant("ola") == ("ola", None)

    def test_missing_fallback_rejected(self):
        """Test that an elements table without 'p' is refused."""
        with pytest.raises(ValueError, match="'p'"):
            LookupTables.create(elements={"div": "paragraph"})

    def test_partial_override_keeps_other_defaults(self):
        """Test that omitted tables keep their defaults."""
        tables = LookupTables.create(mark_elements={"b": "bold"})

        assert tables.mark_for("b") == "bold"
        assert tables.mark_for("em") is None
        assert tables.type_for("li") == "list-item"
        assert tables.is_inline("a")

    def test_tables_are_read_only(self):
        """Test that the tables cannot be mutated after creation."""
        with pytest.raises(TypeError):
            DEFAULT_TABLES.elements["x"] = "y"
