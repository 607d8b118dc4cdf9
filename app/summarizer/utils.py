from app.core.llm import generate_text
from app.core.parsing import extract_section, extract_urls
from app.database.mongo import log_error
from app.resources.utils import find_resource_link
from prompts.prompts import MEDICAL_SUMMARIZER_PROMPT
from .schemas import TopicSummary
from typing import List, Optional
import re

_SOURCES_LABEL = re.compile(r"^[ \t#*\-]*sources[ \t*]*:", re.IGNORECASE | re.MULTILINE)

MIN_TOPIC_LENGTH = 3
MAX_SOURCE_LINKS = 5
FALLBACK_SOURCES = ["MedlinePlus", "World Health Organization"]


def validate_topic(topic: Optional[str]) -> str:
    cleaned = (topic or "").strip()
    if len(cleaned) < MIN_TOPIC_LENGTH:
        raise ValueError("Please enter a topic with at least 3 characters.")
    return cleaned


def default_source_links() -> List[str]:
    return [link for link in (find_resource_link(title) for title in FALLBACK_SOURCES) if link]


def parse_topic_summary(reply: str) -> TopicSummary:
    """
    Slice the reply into summary and links.
    Falls back to the whole reply when there is no SUMMARY section, and to the
    curated MedlinePlus/WHO links when the model cites nothing.

    Raises:
        Exception: If the reply holds no summary text (e.g. only a SOURCES list)
    """
    summary = extract_section(reply, "SUMMARY", ["SOURCES"])
    sources = extract_section(reply, "SOURCES")

    if not summary:
        # Links are kept out of a summary built from the whole reply
        summary = _SOURCES_LABEL.split(reply, maxsplit=1)[0].strip()
    if not summary:
        raise Exception("Failed to summarize the specified topic.")

    links = extract_urls(sources)[:MAX_SOURCE_LINKS] or default_source_links()
    return TopicSummary(summary=summary, source_links=links)


async def summarize_topic(topic: str) -> TopicSummary:
    """
    Summarize a medical topic for a patient.

    Raises:
        ValueError: If the topic is too short
        Exception: If the model call fails
    """
    cleaned_topic = validate_topic(topic)

    try:
        reply = await generate_text(
            MEDICAL_SUMMARIZER_PROMPT.format(topic=cleaned_topic),
            temperature=0.3,
            max_output_tokens=900
        )
        return parse_topic_summary(reply)

    except Exception as e:
        await log_error(
            error=e,
            location="summarizer/utils.py - summarize_topic",
            additional_info={"topic": cleaned_topic}
        )
        raise
