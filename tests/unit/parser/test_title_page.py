"""Tests for title page extraction."""

from scriptlens.parser import ElementKind, classify, extract_title_page
from scriptlens.parser.title_page import (
    TitlePageExtractor,
    is_title_page_sentinel,
    parse_title_page_line,
    title_page_metadata,
)


class TestTitlePageLines:
    """Test single-line helpers."""

    def test_parse_splits_on_first_colon(self):
        """Test values keep any further colons."""
        assert parse_title_page_line("Contact:  a@b.c: ext 5 ") == (
            "Contact",
            "a@b.c: ext 5",
        )

    def test_parse_without_colon(self):
        """Test lines without a colon are not entries."""
        assert parse_title_page_line("Just a line") is None

    def test_sentinel(self):
        """Test the sentinel ignores surrounding whitespace only."""
        assert is_title_page_sentinel(":")
        assert is_title_page_sentinel("  :  ")
        assert not is_title_page_sentinel("::")
        assert not is_title_page_sentinel("Title:")


class TestTitlePageExtractor:
    """Test the extractor state machine."""

    def test_sentinel_closes_permanently(self):
        """Test nothing is absorbed after the sentinel."""
        extractor = TitlePageExtractor()
        assert extractor.consume("Title: X")
        assert extractor.consume(":")
        assert not extractor.active
        assert not extractor.consume("Author: Y")
        assert extractor.entries == {"Title": "X"}

    def test_non_colon_line_closes(self):
        """Test a line without a colon ends title-page mode and is rejected."""
        extractor = TitlePageExtractor()
        assert not extractor.consume("She waits.")
        assert not extractor.active

    def test_blank_line_closes_after_entries(self):
        """Test a blank line ends a non-empty block."""
        extractor = TitlePageExtractor()
        extractor.blank_line()
        assert extractor.active
        extractor.consume("Title: X")
        extractor.blank_line()
        assert not extractor.active

    def test_last_value_wins(self):
        """Test repeated keys keep the latest value."""
        extractor = TitlePageExtractor()
        extractor.consume("Title: First")
        extractor.consume("Title: Second")
        assert extractor.entries == {"Title": "Second"}


class TestExtractTitlePage:
    """Test title page extraction through the classifier."""

    def test_sentinel_terminated_block(self):
        """Test the classic title block followed by one scene."""
        result = classify("Title: X\nAuthor: Y\n:\n\nINT. ROOM - DAY\n")
        assert result.title_page == {"Title": "X", "Author": "Y"}
        assert [e.kind for e in result.elements] == [ElementKind.SCENE_HEADING]

    def test_sentinel_line_produces_no_element(self):
        """Test the sentinel is consumed by the title page."""
        result = classify("Title: X\n:\nSARAH\n")
        assert [e.line_number for e in result.elements] == [3]

    def test_no_title_page(self):
        """Test a script without metadata has an empty table."""
        assert extract_title_page("INT. HOUSE - DAY\nShe waits.\n") == {}

    def test_heading_with_colon_is_not_metadata(self):
        """Test a heading containing a time is classified, not absorbed."""
        result = classify("EXT. STREET - 10:00\nCars pass.\n")
        assert result.title_page == {}
        assert result.elements[0].kind is ElementKind.SCENE_HEADING

    def test_transition_with_colon_is_not_metadata(self):
        """Test FADE IN: opens the body."""
        result = classify("FADE IN:\nINT. HOUSE - DAY\n")
        assert result.title_page == {}
        assert result.elements[0].kind is ElementKind.TRANSITION

    def test_block_without_sentinel_ends_at_blank_line(self):
        """Test colon lines after the blank line belong to the body."""
        result = classify("Title: X\n\nNote: keep going\n")
        assert result.title_page == {"Title": "X"}
        assert result.elements[0].text == "Note: keep going"

    def test_first_body_line_is_classified(self):
        """Test the line that ends title-page mode still becomes an element."""
        result = classify("Title: X\nSARAH\nHello.\n")
        assert result.title_page == {"Title": "X"}
        assert [e.kind for e in result.elements] == [
            ElementKind.CHARACTER_CUE,
            ElementKind.DIALOGUE,
        ]

    def test_keys_and_values_trimmed(self):
        """Test whitespace around keys and values is dropped."""
        assert extract_title_page("  Title :   Big Fish  \n:\n") == {
            "Title": "Big Fish"
        }

    def test_sample_screenplay(self, sample_screenplay):
        """Test the bundled sample's title page."""
        assert extract_title_page(sample_screenplay) == {
            "Title": "The Coffee Shop",
            "Credit": "Written by",
            "Author": "Jane Doe",
            "Draft date": "2024-01-15",
        }


class TestTitlePageMetadata:
    """Test well-known field resolution."""

    def test_case_insensitive_fields(self):
        """Test keys are matched regardless of capitalization."""
        metadata = title_page_metadata(
            {"TITLE": "Pilot", "Written By": "Ann", "Draft Date": "May"}
        )
        assert metadata.title == "Pilot"
        assert metadata.author == "Ann"
        assert metadata.draft_date == "May"

    def test_episode_and_season_numbers(self):
        """Test numeric episode and season values become integers."""
        metadata = title_page_metadata(
            {"Series": "Show", "Episode": "3", "Season": "Two"}
        )
        assert metadata.series_title == "Show"
        assert metadata.episode == 3
        assert metadata.season == "Two"

    def test_to_dict_drops_unset(self):
        """Test only resolved fields are serialized."""
        assert title_page_metadata({"Title": "Pilot"}).to_dict() == {"title": "Pilot"}
