"""Single-pass line classifier for the screenplay markup dialect.

Every non-blank line that is not part of the title page becomes exactly one
``Element``. Lines are tested against ``LINE_RULES`` top to bottom and the
first matching rule wins; several rules are prefix or suffix variants of each
other, so the order of the ladder decides the outcome. Lines that match no
rule become dialogue when a character cue is pending and action otherwise.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from scriptlens.config import get_logger
from scriptlens.parser.fountain_models import (
    ClassificationResult,
    Element,
    ElementKind,
    Emphasis,
)
from scriptlens.parser.title_page import TitlePageExtractor, split_lines

logger = get_logger(__name__)

# Uppercase INT/EXT-style prefix shared by forced and regular scene headings
SCENE_HEADING_TOKEN = r"(?:INT\.?/EXT|INT-EXT|I/E|I-E|INT|EXT)\.?\s+"

TRANSITION_PHRASES = (
    "FADE TO BLACK",
    "FADE OUT",
    "FADE IN",
    "CUT TO BLACK",
    "CUT TO",
    "DISSOLVE TO",
    "SMASH CUT TO",
    "JUMP CUT TO",
    "MATCH CUT TO",
    "IRIS IN",
    "IRIS OUT",
    "WIPE TO",
    "THE END",
    "SMASH CUT",
    "JUMP CUT",
    "MATCH CUT",
    "DISSOLVE",
    "FADE",
    "CUT",
    "WIPE",
    "END",
)

_TRANSITION_ALTERNATION = "|".join(
    re.escape(phrase) for phrase in sorted(TRANSITION_PHRASES, key=len, reverse=True)
)


@dataclass(frozen=True)
class LineRule:
    """A single rung of the classification ladder.

    Patterns may capture a ``text`` group holding the line content with its
    markup delimiters removed; without one the whole trimmed line is kept.
    """

    kind: ElementKind
    pattern: re.Pattern[str]

    def match(self, line: str) -> re.Match[str] | None:
        return self.pattern.match(line)

    def element_text(self, match: re.Match[str], line: str) -> str:
        """Normalized element text for a successful match."""
        if self.kind is ElementKind.PAGE_BREAK:
            return ""
        if "text" in self.pattern.groupindex:
            return (match.group("text") or "").strip()
        return line


LINE_RULES: tuple[LineRule, ...] = (
    LineRule(ElementKind.PAGE_BREAK, re.compile(r"^={3,}$")),
    LineRule(
        ElementKind.FORCED_SCENE_HEADING,
        re.compile(rf"^!(?P<text>{SCENE_HEADING_TOKEN}.*)$"),
    ),
    LineRule(ElementKind.FORCED_ACTION, re.compile(r"^@(?P<text>.*)$")),
    LineRule(ElementKind.LYRIC, re.compile(r"^~(?P<text>.*)~$")),
    LineRule(ElementKind.CENTERED, re.compile(r"^>(?P<text>.*)<$")),
    LineRule(ElementKind.NOTE, re.compile(r"^\[\[(?P<text>.*)\]\]$")),
    LineRule(ElementKind.SYNOPSIS, re.compile(r"^=\s+(?P<text>.*)$")),
    LineRule(ElementKind.SECTION, re.compile(r"^(?P<hashes>#+)\s+(?P<text>.*)$")),
    LineRule(
        ElementKind.TRANSITION,
        re.compile(rf"^(?:(?:{_TRANSITION_ALTERNATION})\b.*|[A-Z][A-Z\s]*TO:)$"),
    ),
    LineRule(ElementKind.SCENE_HEADING, re.compile(rf"^{SCENE_HEADING_TOKEN}.*$")),
    LineRule(
        ElementKind.DUAL_DIALOGUE_CUE,
        re.compile(r"^(?P<text>[A-Z][A-Z\s]*?)\s*\^$"),
    ),
    LineRule(ElementKind.PARENTHETICAL, re.compile(r"^\((?P<text>.*)\)$")),
    LineRule(ElementKind.CHARACTER_CUE, re.compile(r"^[A-Z][A-Z\s]*$")),
)

# A line matching one of these is body text even if it contains a colon
_BODY_OPENING_KINDS = frozenset(
    {
        ElementKind.FORCED_SCENE_HEADING,
        ElementKind.SCENE_HEADING,
        ElementKind.TRANSITION,
    }
)

# Checked in order: the first pattern type found anywhere in the line wins
EMPHASIS_PATTERNS: tuple[tuple[re.Pattern[str], Emphasis], ...] = (
    (re.compile(r"\*\*[^*]+\*\*|__[^_]+__"), Emphasis.BOLD_ITALIC),
    (re.compile(r"\*[^*]+\*"), Emphasis.BOLD),
    (re.compile(r"_[^_]+_"), Emphasis.ITALIC),
)

_EMPHASIS_MARKERS = (
    re.compile(r"\*\*([^*]+)\*\*"),
    re.compile(r"__([^_]+)__"),
    re.compile(r"\*([^*]+)\*"),
    re.compile(r"_([^_]+)_"),
)


def match_line_rule(line: str) -> tuple[LineRule, re.Match[str]] | None:
    """Find the first rule in the ladder matching a trimmed line.

    Dialogue and action are not part of the ladder: they depend on whether a
    character cue is pending, which only the caller knows.
    """
    for rule in LINE_RULES:
        match = rule.match(line)
        if match is not None:
            return rule, match
    return None


def opens_body(line: str) -> bool:
    """Whether a trimmed line is unmistakably screenplay body text."""
    matched = match_line_rule(line)
    return matched is not None and matched[0].kind in _BODY_OPENING_KINDS


def detect_emphasis(text: str) -> Emphasis | None:
    """Tag a dialogue line with the strongest emphasis marker it contains."""
    for pattern, emphasis in EMPHASIS_PATTERNS:
        if pattern.search(text):
            return emphasis
    return None


def strip_emphasis(text: str) -> str:
    """Remove bold and italic markers, keeping the emphasized words."""
    for pattern in _EMPHASIS_MARKERS:
        text = pattern.sub(r"\1", text)
    return text


class LineClassifier:
    """Classify screenplay text into a title page table and typed elements.

    All state used while classifying (title-page mode and the pending
    character cue) lives in local variables of :meth:`classify`, so a single
    instance can be shared freely.
    """

    def classify(self, text: str) -> ClassificationResult:
        """Classify every line of ``text``.

        Args:
            text: Full document text; any string, including empty

        Returns:
            ClassificationResult with the title page table and elements in
            source order
        """
        title_page = TitlePageExtractor()
        elements: list[Element] = []
        pending_cue: str | None = None

        for line_number, raw in enumerate(split_lines(text), start=1):
            line = raw.strip()
            if not line:
                title_page.blank_line()
                continue

            if title_page.active and opens_body(line):
                title_page.close()
            elif title_page.consume(line):
                continue

            element = self.classify_line(line, raw, line_number, pending_cue)
            if element.is_cue:
                pending_cue = element.text
            elif element.is_scene_heading:
                pending_cue = None
            elements.append(element)

        logger.debug(
            "Classified screenplay text",
            title_page_entries=len(title_page.entries),
            elements=len(elements),
        )
        return ClassificationResult(dict(title_page.entries), tuple(elements))

    def classify_line(
        self,
        line: str,
        raw: str,
        line_number: int,
        pending_cue: str | None,
    ) -> Element:
        """Classify one trimmed, non-blank body line.

        Args:
            line: Trimmed line content
            raw: The untouched source line
            line_number: 1-based source line number
            pending_cue: Name of the most recent character cue, if any

        Returns:
            The element for this line; never fails
        """
        matched = match_line_rule(line)
        if matched is not None:
            rule, match = matched
            section_level = (
                len(match.group("hashes"))
                if rule.kind is ElementKind.SECTION
                else None
            )
            return Element(
                kind=rule.kind,
                text=rule.element_text(match, line),
                raw=raw,
                line_number=line_number,
                section_level=section_level,
            )

        if pending_cue is not None:
            return Element(
                kind=ElementKind.DIALOGUE,
                text=line,
                raw=raw,
                line_number=line_number,
                emphasis=detect_emphasis(line),
            )

        return Element(
            kind=ElementKind.ACTION, text=line, raw=raw, line_number=line_number
        )


def classify(text: str) -> ClassificationResult:
    """Classify screenplay text with a fresh :class:`LineClassifier`."""
    return LineClassifier().classify(text)
