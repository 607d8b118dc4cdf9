"""
Predictive health analytics utilities
"""
from app.core.llm import generate_text
from app.core.parsing import extract_section, split_lines, find_keyword, extract_score
from app.database.mongo import log_error
from prompts.prompts import HEALTH_ANALYTICS_PROMPT
from .schemas import (
    PatientData, HealthAnalytics, RiskAssessment, RiskLevel, PredictiveInsights,
    HealthRecommendations, HealthScore
)
from typing import Optional, List, Dict, Any, Iterable
import json
import re

NOT_SPECIFIED = "Not specified"

RISK_HEADING = "RISK ASSESSMENT"
INSIGHTS_HEADING = "PREDICTIVE INSIGHTS"
RECOMMENDATIONS_HEADING = "RECOMMENDATIONS"
SCORE_HEADING = "HEALTH SCORE"

DEFAULT_RISK_SCORE = 65
DEFAULT_CURRENT_SCORE = 75
DEFAULT_PROJECTED_SCORE = 85
DEFAULT_PROTECTIVE_FACTORS = ["Regular exercise", "Healthy diet"]
DEFAULT_LONG_TERM = ["Maintain current lifestyle for optimal health"]
DEFAULT_TRENDS = ["Improving health metrics with current interventions"]
DEFAULT_LIFESTYLE = ["Increase physical activity", "Improve diet quality"]
DEFAULT_SCREENING = ["Annual health checkup recommended"]
DEFAULT_MONITORING = ["Monitor blood pressure weekly", "Track weight monthly"]
DEFAULT_SCORE_COMPONENTS = {
    "cardiovascular": 80,
    "metabolic": 70,
    "lifestyle": 75,
    "preventive": 80
}

_OPTION_LIST = re.compile(r"\b\w+(?:/\w+)+\b")


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """BMI rounded to one decimal, or None when weight or height is missing."""
    if not weight_kg or not height_cm:
        return None
    return round(weight_kg / (height_cm / 100) ** 2, 1)


def _value(value: Any) -> Any:
    return NOT_SPECIFIED if value is None or value == "" else value


def _joined(items: List[str]) -> str:
    return ", ".join(items) if items else "None"


def _as_json(value: Optional[Dict[str, Any]]) -> str:
    return json.dumps(value) if value else NOT_SPECIFIED


def build_health_analytics_prompt(patient_data: PatientData, analysis_type: str, bmi: Optional[float]) -> str:
    """Render every patient field into the analytics prompt ("Not specified" when absent)."""
    demographics = patient_data.demographics
    vitals = patient_data.vitals
    labs = patient_data.lab_results
    lifestyle = patient_data.lifestyle
    history = patient_data.medical_history

    return HEALTH_ANALYTICS_PROMPT.format(
        age=_value(demographics.age),
        gender=_value(demographics.gender),
        height=_value(demographics.height),
        weight=_value(demographics.weight),
        bmi=bmi if bmi is not None else "Not calculated",
        ethnicity=_value(demographics.ethnicity),
        blood_pressure=_value(vitals.blood_pressure),
        heart_rate=_value(vitals.heart_rate),
        temperature=_value(vitals.temperature),
        oxygen_saturation=_value(vitals.oxygen_saturation),
        vitals_bmi=_value(vitals.bmi if vitals.bmi is not None else bmi),
        blood_sugar=_value(labs.blood_sugar),
        cholesterol=_as_json(labs.cholesterol),
        kidney_function=_as_json(labs.kidney_function),
        liver_function=_as_json(labs.liver_function),
        smoking="Yes" if lifestyle.smoking else "No",
        alcohol=_value(lifestyle.alcohol),
        exercise=_value(lifestyle.exercise),
        diet=_value(lifestyle.diet),
        sleep=_value(lifestyle.sleep),
        conditions=_joined(history.conditions),
        medications=_joined(history.medications),
        surgeries=_joined(history.surgeries),
        family_history=_joined(history.family_history),
        analysis_type=analysis_type
    )


def _items(block: Optional[str], skip: Iterable[str] = ()) -> List[str]:
    """Section lines minus sub-headers ("...:") and lines mentioning any skip phrase."""
    skip_phrases = [phrase.lower() for phrase in skip]
    items: List[str] = []
    for line in split_lines(block):
        lowered = line.lower()
        if line.endswith(":") or any(phrase in lowered for phrase in skip_phrases):
            continue
        items.append(line)
    return items


def detect_risk_level(block: Optional[str]) -> RiskLevel:
    if not block:
        return RiskLevel.low

    text = _OPTION_LIST.sub("", block)
    level_line = next((line for line in text.splitlines() if "risk level" in line.lower()), "")
    options = ["high", "medium", "moderate", "low"]

    keyword = find_keyword(level_line, options) or find_keyword(text, options)
    if keyword is None:
        return RiskLevel.low
    keyword = keyword.lower()
    return RiskLevel.medium if keyword == "moderate" else RiskLevel(keyword)


def _score(block: Optional[str], labels: List[str], default: int) -> int:
    for label in labels:
        value = extract_score(block, label)
        if value is not None:
            return value
    return default


def parse_health_analytics(reply: str, bmi: Optional[float]) -> HealthAnalytics:
    """
    Slice the model reply into HealthAnalytics.
    Sections the model leaves out keep their canned defaults.
    """
    risk_block = extract_section(reply, RISK_HEADING, [INSIGHTS_HEADING, RECOMMENDATIONS_HEADING, SCORE_HEADING])
    insights_block = extract_section(reply, INSIGHTS_HEADING, [RECOMMENDATIONS_HEADING, SCORE_HEADING])
    recommendations_block = extract_section(reply, RECOMMENDATIONS_HEADING, [SCORE_HEADING])
    score_block = extract_section(reply, SCORE_HEADING)

    return HealthAnalytics(
        bmi=bmi,
        risk_assessment=RiskAssessment(
            overall_risk=detect_risk_level(risk_block),
            risk_score=_score(risk_block, ["risk score"], DEFAULT_RISK_SCORE),
            risk_factors=_items(risk_block, skip=["risk level", "risk score"]),
            protective_factors=list(DEFAULT_PROTECTIVE_FACTORS)
        ),
        predictive_insights=PredictiveInsights(
            short_term=_items(insights_block),
            long_term=list(DEFAULT_LONG_TERM),
            trends=list(DEFAULT_TRENDS)
        ),
        recommendations=HealthRecommendations(
            immediate=_items(recommendations_block),
            lifestyle=list(DEFAULT_LIFESTYLE),
            screening=list(DEFAULT_SCREENING),
            monitoring=list(DEFAULT_MONITORING)
        ),
        health_score=HealthScore(
            current=_score(score_block, ["current health score", "current"], DEFAULT_CURRENT_SCORE),
            projected=_score(score_block, ["projected health score", "projected"], DEFAULT_PROJECTED_SCORE),
            components=dict(DEFAULT_SCORE_COMPONENTS)
        )
    )


async def run_health_analytics(patient_data: PatientData, analysis_type: str) -> HealthAnalytics:
    """
    Run predictive health analytics for one patient.

    Args:
        patient_data: Demographics, vitals, labs, lifestyle and history
        analysis_type: Free-text analysis focus (e.g. "comprehensive", "cardiovascular")

    Returns:
        HealthAnalytics: Parsed analytics

    Raises:
        Exception: If the model call fails
    """
    bmi = calculate_bmi(patient_data.demographics.weight, patient_data.demographics.height)

    try:
        reply = await generate_text(
            build_health_analytics_prompt(patient_data, analysis_type, bmi),
            temperature=0.2,
            max_output_tokens=2000
        )
        return parse_health_analytics(reply, bmi)

    except Exception as e:
        await log_error(
            error=e,
            location="analytics/utils.py - run_health_analytics",
            additional_info={"analysis_type": analysis_type}
        )
        raise
