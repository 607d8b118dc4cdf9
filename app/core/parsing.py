"""
Helpers for slicing free-text model replies into response fields.

Model replies are plain text with labelled sections (e.g. "URGENCY ASSESSMENT:").
Models decorate those labels with markdown, so heading matches tolerate leading
hashes, bold markers, bullets and "1." numbering.
"""
import re
from typing import Iterable, List, Optional

_HEADING_PREFIX = r"[ \t#*\-•]*(?:\d+[.)][ \t]*)?[ \t#*]*"
_BULLET_PREFIX = re.compile(r"^\s*(?:[-*•]+\s*|\d+[.)]\s+)")
_URL_PATTERN = re.compile(r"https?://[^\s<>\"'()\[\]]+")
_PERCENT_PATTERN = re.compile(r"(\d{1,3}(?:\.\d+)?)\s*%")
_SCALE_PATTERN = re.compile(r"\(?\b0\s*[-–]\s*100\b\)?")


def _label_pattern(label: str) -> str:
    return r"\s+".join(re.escape(word) for word in label.split())


def _heading_pattern(heading: str) -> str:
    return rf"^{_HEADING_PREFIX}{_label_pattern(heading)}[ \t*]*:[ \t*]*"


def extract_section(text: str, heading: str, next_headings: Iterable[str] = ()) -> Optional[str]:
    """
    Return the body of a labelled section.

    The body runs from `heading:` (at the start of a line) up to the first of
    `next_headings` or the end of the text.

    Args:
        text: Model reply
        heading: Section label, matched case-insensitively
        next_headings: Labels that terminate the section

    Returns:
        Optional[str]: Stripped section body, or None if the heading is absent
    """
    if not text:
        return None

    stops = "|".join(f"(?:{_heading_pattern(h)})" for h in next_headings)
    lookahead = rf"(?={stops}|\Z)" if stops else r"\Z"
    pattern = re.compile(
        _heading_pattern(heading) + r"(.*?)" + lookahead,
        re.IGNORECASE | re.DOTALL | re.MULTILINE
    )

    match = pattern.search(text)
    if not match:
        return None
    return match.group(1).strip()


def split_lines(block: Optional[str]) -> List[str]:
    """Split a section body into clean, non-empty lines (bullets and bold removed)."""
    if not block:
        return []

    lines: List[str] = []
    for line in block.splitlines():
        cleaned = line.strip().replace("**", "")
        cleaned = _BULLET_PREFIX.sub("", cleaned).strip()
        if cleaned:
            lines.append(cleaned)
    return lines


def find_keyword(text: Optional[str], options: Iterable[str]) -> Optional[str]:
    """Return the first option (in priority order) present in text as a whole word."""
    if not text:
        return None
    for option in options:
        if re.search(rf"\b{re.escape(option)}\b", text, re.IGNORECASE):
            return option
    return None


def extract_percentage(text: Optional[str]) -> Optional[float]:
    """First "NN%" in text as a fraction between 0 and 1."""
    match = _PERCENT_PATTERN.search(text or "")
    if not match:
        return None
    return min(float(match.group(1)), 100.0) / 100


def extract_score(text: Optional[str], label: str) -> Optional[int]:
    """
    First 0-100 integer following `label` on the same line.
    A "(0-100)" scale hint after the label is ignored.
    """
    if not text:
        return None

    match = re.search(rf"{_label_pattern(label)}([^\n]*)", text, re.IGNORECASE)
    if not match:
        return None

    rest = _SCALE_PATTERN.sub("", match.group(1))
    number = re.search(r"\b(\d{1,3})\b", rest)
    if not number:
        return None

    value = int(number.group(1))
    return value if 0 <= value <= 100 else None


def extract_urls(text: Optional[str]) -> List[str]:
    """Unique http(s) URLs in order of appearance, trailing punctuation trimmed."""
    urls: List[str] = []
    for match in _URL_PATTERN.findall(text or ""):
        url = match.rstrip(".,;:!?*")
        if url not in urls:
            urls.append(url)
    return urls
