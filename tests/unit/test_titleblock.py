#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_titleblock.py
"""Unit tests for the front-matter title block model.

Tests cover:
- Lenient date parsing
- Author and tag coercion
- YAML front matter loading and its failure modes

"""

import datetime

import pytest

from md2troff.exceptions import FrontMatterError, RenderingError
from md2troff.titleblock import Author, TitleBlock, load_title_block, parse_date


@pytest.mark.unit
class TestParseDate:
    """Tests for loosely formatted dates."""

    @pytest.mark.parametrize(
        "value",
        [
            "Feb 22, 2020",
            "February 22, 2020",
            "22 Feb 2020",
            "22 February 2020",
            "2020-02-22",
            "2020/02/22",
            "02/22/2020",
            "  Feb   22,  2020 ",
        ],
    )
    def test_date_only_formats(self, value) -> None:
        assert parse_date(value).date() == datetime.date(2020, 2, 22)

    def test_unix_date_output(self) -> None:
        assert parse_date("Sat Feb 22 15:18:37 GMT 2020") == datetime.datetime(2020, 2, 22, 15, 18, 37)

    def test_unix_date_with_other_zone(self) -> None:
        assert parse_date("Sat Feb 22 15:18:37 PST 2020") == datetime.datetime(2020, 2, 22, 15, 18, 37)

    def test_iso_timestamp_keeps_zone(self) -> None:
        parsed = parse_date("2020-02-22T15:18:37+01:00")
        assert parsed.utcoffset() == datetime.timedelta(hours=1)

    def test_rfc2822(self) -> None:
        parsed = parse_date("Sat, 22 Feb 2020 15:18:37 +0000")
        assert (parsed.year, parsed.month, parsed.day, parsed.hour) == (2020, 2, 22, 15)

    def test_date_objects(self) -> None:
        assert parse_date(datetime.date(2020, 2, 22)) == datetime.datetime(2020, 2, 22)
        moment = datetime.datetime(2020, 2, 22, 1, 2, 3)
        assert parse_date(moment) is moment

    @pytest.mark.parametrize("value", ["", "   ", "not a date", "2020-13-45"])
    def test_unrecognized(self, value) -> None:
        with pytest.raises(ValueError):
            parse_date(value)

    def test_unsupported_type(self) -> None:
        with pytest.raises(ValueError):
            parse_date(20200222)


@pytest.mark.unit
class TestTitleBlockFromDict:
    """Tests for building title blocks from mappings."""

    def test_all_fields(self) -> None:
        block = TitleBlock.from_dict(
            {
                "title": "T",
                "date": "Feb 22, 2020",
                "slug": "t-slug",
                "authors": [{"name": "Name", "email": "Email", "affiliation": "Affiliation"}],
                "abstract": "A",
                "tags": ["x", "y"],
            }
        )

        assert block.title == "T"
        assert block.date == datetime.datetime(2020, 2, 22)
        assert block.slug == "t-slug"
        assert block.authors == (Author(name="Name", affiliation="Affiliation", email="Email"),)
        assert block.abstract == "A"
        assert block.tags == frozenset({"x", "y"})

    def test_empty_mapping(self) -> None:
        assert TitleBlock.from_dict({}) == TitleBlock()

    def test_unknown_keys_are_ignored(self) -> None:
        assert TitleBlock.from_dict({"title": "T", "layout": "post"}) == TitleBlock(title="T")

    def test_author_given_as_string(self) -> None:
        assert TitleBlock.from_dict({"authors": ["Jane"]}).authors == (Author(name="Jane"),)

    def test_comma_separated_tags(self) -> None:
        assert TitleBlock.from_dict({"tags": "a, b,,c"}).tags == frozenset({"a", "b", "c"})

    def test_authors_must_be_a_list(self) -> None:
        with pytest.raises(ValueError, match="authors"):
            TitleBlock.from_dict({"authors": {"name": "Jane"}})

    def test_tags_must_be_a_list(self) -> None:
        with pytest.raises(ValueError, match="tags"):
            TitleBlock.from_dict({"tags": 3})

    def test_title_block_is_immutable(self) -> None:
        block = TitleBlock(title="T")
        with pytest.raises(AttributeError):
            block.title = "U"


@pytest.mark.unit
class TestLoadTitleBlock:
    """Tests for YAML front matter loading."""

    def test_load(self, front_matter, sample_title_block) -> None:
        assert load_title_block(front_matter) == sample_title_block

    def test_yaml_date_value(self) -> None:
        """YAML turns unquoted ISO dates into date objects."""
        block = load_title_block("title: T\ndate: 2020-02-22\n")
        assert block.date == datetime.datetime(2020, 2, 22)

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FrontMatterError, match="not valid YAML") as exc_info:
            load_title_block("title: [unclosed")
        assert exc_info.value.payload == "title: [unclosed"
        assert exc_info.value.original_error is not None

    @pytest.mark.parametrize("payload", ["just a sentence", "- a\n- b\n", ""])
    def test_not_a_mapping(self, payload) -> None:
        with pytest.raises(FrontMatterError, match="mapping"):
            load_title_block(payload)

    def test_bad_date(self) -> None:
        with pytest.raises(FrontMatterError, match="Invalid front matter") as exc_info:
            load_title_block("title: T\ndate: someday\n")
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_front_matter_errors_are_fatal_rendering_errors(self) -> None:
        with pytest.raises(RenderingError):
            load_title_block("42")
