from app.core.parsing import (
    extract_section, split_lines, find_keyword, extract_percentage,
    extract_score, extract_urls
)

REPLY = """Disclaimer: this is not a medical diagnosis.

## 1. **Potential Conditions:**
- Migraine - recurring headache
- Tension headache

**URGENCY ASSESSMENT:** Medium
Risk factors: stress

Recommendations:
1. Rest in a dark room
2. **Stay hydrated**
"""


def test_extract_section_tolerates_markdown_decoration():
    block = extract_section(REPLY, "POTENTIAL CONDITIONS", ["URGENCY ASSESSMENT", "RECOMMENDATIONS"])
    assert block == "- Migraine - recurring headache\n- Tension headache"


def test_extract_section_runs_to_end_without_stop_headings():
    block = extract_section(REPLY, "RECOMMENDATIONS")
    assert block.startswith("1. Rest in a dark room")
    assert block.endswith("2. **Stay hydrated**")


def test_extract_section_same_line_body():
    block = extract_section(REPLY, "urgency assessment", ["RECOMMENDATIONS"])
    assert block.splitlines()[0] == "Medium"


def test_extract_section_missing_heading():
    assert extract_section(REPLY, "DIAGNOSIS") is None
    assert extract_section("", "DIAGNOSIS") is None


def test_extract_section_requires_line_start():
    text = "The usage: is mentioned inline.\nDOSAGE: 200mg"
    assert extract_section(text, "USAGE", ["DOSAGE"]) is None


def test_split_lines_strips_bullets_numbers_and_bold():
    block = "- first\n\n2. **second**\n* third\n• fourth"
    assert split_lines(block) == ["first", "second", "third", "fourth"]
    assert split_lines(None) == []


def test_find_keyword_priority_and_whole_words():
    assert find_keyword("risk is high, not low", ["High", "Low"]) == "High"
    assert find_keyword("risk is low", ["High", "Low"]) == "Low"
    assert find_keyword("slowly", ["low"]) is None
    assert find_keyword(None, ["low"]) is None


def test_extract_percentage():
    assert extract_percentage("Confidence: 85%") == 0.85
    assert extract_percentage("about 12.5 %") == 0.125
    assert extract_percentage("no number") is None


def test_extract_score_ignores_scale_hint():
    text = "Current health score (0-100): 72\nProjected health score: 88"
    assert extract_score(text, "current health score") == 72
    assert extract_score(text, "projected health score") == 88


def test_extract_score_same_line_only():
    assert extract_score("Risk score:\n80", "risk score") is None
    assert extract_score("Risk score: 250", "risk score") is None
    assert extract_score("nothing here", "risk score") is None


def test_extract_urls_unique_and_trimmed():
    text = (
        "- https://www.who.int/news.\n"
        "- See (https://medlineplus.gov/diabetes.html), and https://www.who.int/news"
    )
    assert extract_urls(text) == ["https://www.who.int/news", "https://medlineplus.gov/diabetes.html"]
    assert extract_urls(None) == []
