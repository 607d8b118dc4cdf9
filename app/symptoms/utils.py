"""
Symptom analyzer utilities
"""
from app.core.llm import generate_text
from app.core.parsing import extract_section, split_lines, find_keyword, extract_percentage
from app.database.mongo import log_error
from prompts.prompts import SYMPTOM_ANALYZER_PROMPT
from .schemas import SymptomAnalysis, PotentialCondition, Severity, Urgency
from typing import List, Optional
import re

MIN_SYMPTOMS_LENGTH = 10
DEFAULT_CONFIDENCE = 0.75
DEFAULT_DESCRIPTION = "Description from AI analysis"
DEFAULT_NEXT_STEPS = "Monitor symptoms and consult doctor if they worsen"
DEFAULT_RISK_FACTORS = ["Age-related factors", "Lifestyle considerations"]

CONDITIONS_HEADING = "POTENTIAL CONDITIONS"
URGENCY_HEADING = "URGENCY ASSESSMENT"
RECOMMENDATIONS_HEADING = "RECOMMENDATIONS"

# Highest first so the more cautious reading wins
URGENCY_PRIORITY = [Urgency.immediate, Urgency.high, Urgency.medium, Urgency.low]
SEVERITY_PRIORITY = [Severity.critical, Severity.severe, Severity.moderate, Severity.mild]

# "Low/Medium/High" option lists echoed back from the prompt
_OPTION_LIST = re.compile(r"\b\w+(?:/\w+)+\b")
_TRAILING_META = re.compile(r"\s*\(([^)]*)\)\s*$")
_NAME_SEPARATOR = re.compile(r"\s*[-–—]\s+|:\s+")
_RISK_LABEL = re.compile(r"^(?:key\s+)?risk\s+factors?(?:\s+to\s+consider)?\s*:?\s*", re.IGNORECASE)


def validate_symptoms(symptoms: Optional[str]) -> str:
    """
    Validate the symptom description.

    Raises:
        ValueError: If the stripped description is shorter than MIN_SYMPTOMS_LENGTH
    """
    cleaned = (symptoms or "").strip()
    if len(cleaned) < MIN_SYMPTOMS_LENGTH:
        raise ValueError("Please describe your symptoms in at least 10 characters.")
    return cleaned


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def group_condition_lines(block: Optional[str]) -> List[List[str]]:
    """Group the conditions section into [top-level line, *indented detail lines]."""
    raw_lines = [line.rstrip() for line in (block or "").splitlines() if line.strip()]
    if not raw_lines:
        return []

    top_indent = min(_indent(line) for line in raw_lines)
    groups: List[List[str]] = []
    for line in raw_lines:
        if _indent(line) <= top_indent or not groups:
            groups.append([line])
        else:
            groups[-1].append(line)
    return groups


def parse_condition(group: List[str]) -> Optional[PotentialCondition]:
    """Build a PotentialCondition from one group of condition lines."""
    cleaned = split_lines("\n".join(group))
    if not cleaned:
        return None

    head, details = cleaned[0], cleaned[1:]
    full_text = " ".join(cleaned)

    head = _TRAILING_META.sub("", head)
    parts = _NAME_SEPARATOR.split(head, maxsplit=1)
    name = parts[0].strip(" .")
    if not name:
        return None

    if len(parts) > 1 and parts[1].strip():
        description = parts[1].strip()
    elif details:
        description = " ".join(details)
    else:
        description = DEFAULT_DESCRIPTION

    severity = find_keyword(full_text, [s.value for s in SEVERITY_PRIORITY])
    confidence = extract_percentage(full_text)

    return PotentialCondition(
        condition=name,
        description=description,
        severity=Severity(severity) if severity else Severity.moderate,
        confidence=confidence if confidence is not None else DEFAULT_CONFIDENCE,
        next_steps=DEFAULT_NEXT_STEPS
    )


def detect_urgency(block: Optional[str]) -> Urgency:
    """Urgency keyword from the urgency section, preferring the line that names the level."""
    if not block:
        return Urgency.low

    text = _OPTION_LIST.sub("", block)
    level_line = next((line for line in text.splitlines() if "urgency" in line.lower()), "")
    options = [u.value for u in URGENCY_PRIORITY]

    keyword = find_keyword(level_line, options) or find_keyword(text, options)
    return Urgency(keyword) if keyword else Urgency.low


def extract_risk_factors(block: Optional[str]) -> List[str]:
    """Lines of the urgency section that talk about risk."""
    risk_factors: List[str] = []
    for line in split_lines(block):
        if "risk" not in line.lower() or "urgency" in line.lower():
            continue
        factor = _RISK_LABEL.sub("", line).strip()
        if factor:
            risk_factors.append(factor)
    return risk_factors or list(DEFAULT_RISK_FACTORS)


def parse_symptom_analysis(reply: str) -> SymptomAnalysis:
    """
    Slice the model reply into a SymptomAnalysis.

    Args:
        reply: Free-text model reply using the SYMPTOM_ANALYZER_PROMPT section labels

    Returns:
        SymptomAnalysis: Parsed analysis, with canned values where sections are missing
    """
    conditions_block = extract_section(reply, CONDITIONS_HEADING, [URGENCY_HEADING, RECOMMENDATIONS_HEADING])
    urgency_block = extract_section(reply, URGENCY_HEADING, [RECOMMENDATIONS_HEADING])
    recommendations_block = extract_section(reply, RECOMMENDATIONS_HEADING)

    conditions = [
        condition
        for condition in (parse_condition(group) for group in group_condition_lines(conditions_block))
        if condition is not None
    ]
    if not conditions:
        conditions = [
            PotentialCondition(
                condition="Common condition based on symptoms",
                description=DEFAULT_DESCRIPTION,
                severity=Severity.moderate,
                confidence=DEFAULT_CONFIDENCE,
                next_steps=DEFAULT_NEXT_STEPS
            )
        ]

    return SymptomAnalysis(
        analysis=conditions,
        urgency=detect_urgency(urgency_block),
        risk_factors=extract_risk_factors(urgency_block),
        recommendations=split_lines(recommendations_block)
    )


def build_fallback_analysis(symptoms: str) -> SymptomAnalysis:
    """Canned analysis returned when the model call fails."""
    return SymptomAnalysis(
        analysis=[
            PotentialCondition(
                condition="Symptom evaluation required",
                description=f'Based on your symptoms: "{symptoms}", a professional medical evaluation is recommended.',
                severity=Severity.moderate,
                confidence=0.6,
                next_steps="Schedule appointment with healthcare provider"
            )
        ],
        urgency=Urgency.medium,
        risk_factors=["Self-reported symptoms", "Requires professional assessment"],
        recommendations=[
            "Monitor symptoms and note any changes",
            "Keep a symptom diary",
            "Schedule appointment with doctor",
            "Seek immediate care if symptoms worsen"
        ]
    )


async def analyze_symptoms(symptoms: str) -> SymptomAnalysis:
    """
    Analyze a symptom description with the model.

    Args:
        symptoms: Patient's free-text symptom description

    Returns:
        SymptomAnalysis: Parsed analysis, or the fallback analysis if the model call fails

    Raises:
        ValueError: If the description is too short
    """
    cleaned_symptoms = validate_symptoms(symptoms)

    try:
        reply = await generate_text(
            SYMPTOM_ANALYZER_PROMPT.format(symptoms=cleaned_symptoms),
            temperature=0.3,
            max_output_tokens=1500
        )
        return parse_symptom_analysis(reply)

    except Exception as e:
        await log_error(
            error=e,
            location="symptoms/utils.py - analyze_symptoms",
            additional_info={"symptoms_length": len(cleaned_symptoms)}
        )
        return build_fallback_analysis(cleaned_symptoms)
