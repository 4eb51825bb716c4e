"""Title page extraction for screenplay documents.

A screenplay may open with a block of ``Key: Value`` lines. The block ends at
the first sentinel line (a line whose trimmed content is exactly ``:``), at
the first line that does not look like metadata (no colon, or a scene heading
or transition), or at a blank line once at least one entry has been
recorded. Once closed it never reopens for the rest of the parse.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

TITLE_PAGE_SENTINEL = ":"

NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")

AUTHOR_KEYS = ("author", "authors", "writer", "writers", "written by")


def split_lines(text: str) -> list[str]:
    """Split text into physical lines using the universal newline rule."""
    return NEWLINE_PATTERN.split(text)


def is_title_page_sentinel(line: str) -> bool:
    """Check whether a line terminates title-page mode."""
    return line.strip() == TITLE_PAGE_SENTINEL


def parse_title_page_line(line: str) -> tuple[str, str] | None:
    """Split a ``Key: Value`` line on its first colon.

    Args:
        line: A single source line

    Returns:
        Trimmed ``(key, value)`` pair, or None when the line has no colon.
        The value keeps any further colons.
    """
    if ":" not in line:
        return None
    key, value = line.split(":", 1)
    return key.strip(), value.strip()


class TitlePageExtractor:
    """Accumulate title page entries for a single parse.

    The extractor is created fresh by each classification pass; it holds no
    state that outlives that pass.
    """

    def __init__(self) -> None:
        self.entries: dict[str, str] = {}
        self.active = True

    def consume(self, line: str) -> bool:
        """Offer a non-blank trimmed line to the title page.

        Returns:
            True when the line was absorbed (an entry or the sentinel), False
            when it belongs to the screenplay body. A rejected line closes
            title-page mode.
        """
        if not self.active:
            return False

        if is_title_page_sentinel(line):
            self.active = False
            return True

        entry = parse_title_page_line(line)
        if entry is None:
            self.active = False
            return False

        key, value = entry
        self.entries[key] = value
        return True

    def blank_line(self) -> None:
        """Close title-page mode at the blank line that ends the block."""
        if self.entries:
            self.active = False

    def close(self) -> None:
        self.active = False


def extract_title_page(text: str) -> dict[str, str]:
    """Extract only the title page table from raw screenplay text."""
    # Imported here because the classifier drives the extractor
    from scriptlens.parser.line_classifier import classify

    return classify(text).title_page


@dataclass
class TitlePageMetadata:
    """Well-known title page fields resolved case-insensitively."""

    title: str | None = None
    author: str | None = None
    credit: str | None = None
    source: str | None = None
    draft_date: str | None = None
    contact: str | None = None
    series_title: str | None = None
    episode: int | str | None = None
    season: int | str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary, dropping unset fields."""
        return {key: value for key, value in vars(self).items() if value is not None}


def _as_number(value: str) -> int | str:
    try:
        return int(value)
    except ValueError:
        return value


def title_page_metadata(table: dict[str, str]) -> TitlePageMetadata:
    """Resolve common title page keys regardless of their capitalization.

    Args:
        table: Raw title page mapping from the classifier

    Returns:
        TitlePageMetadata with the recognised fields filled in
    """
    lowered = {key.lower(): value for key, value in table.items()}
    metadata = TitlePageMetadata(
        title=lowered.get("title"),
        credit=lowered.get("credit"),
        source=lowered.get("source"),
        draft_date=lowered.get("draft date"),
        contact=lowered.get("contact"),
    )

    for key in AUTHOR_KEYS:
        if key in lowered:
            metadata.author = lowered[key]
            break

    for key in ("series", "series_title", "show"):
        if key in lowered:
            metadata.series_title = lowered[key]
            break

    if "episode" in lowered:
        metadata.episode = _as_number(lowered["episode"])
    if "season" in lowered:
        metadata.season = _as_number(lowered["season"])

    return metadata
