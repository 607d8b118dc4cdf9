import pytest

from app.symptoms.schemas import Severity, Urgency
from app.symptoms.utils import (
    parse_symptom_analysis, detect_urgency, extract_risk_factors, validate_symptoms
)

REPLY = """Disclaimer: This is not a medical diagnosis. Please consult a doctor.

POTENTIAL CONDITIONS:
1. Influenza - viral infection of the respiratory tract (Severity: Moderate, Confidence: 70%)
2. Common cold - mild upper respiratory infection (Severity: Mild, Confidence: 20%)

URGENCY ASSESSMENT:
- Overall urgency level (Low/Medium/High/Immediate): Medium
- Risk factors to consider: age over 65, asthma
- Emergency warning signs: difficulty breathing

RECOMMENDATIONS:
- Rest and drink plenty of fluids
- See a doctor if fever lasts more than 3 days
"""


def test_parse_symptom_analysis():
    analysis = parse_symptom_analysis(REPLY)

    assert [c.condition for c in analysis.analysis] == ["Influenza", "Common cold"]
    flu = analysis.analysis[0]
    assert flu.description == "viral infection of the respiratory tract"
    assert flu.severity == Severity.moderate
    assert flu.confidence == 0.7
    assert flu.next_steps == "Monitor symptoms and consult doctor if they worsen"
    assert analysis.analysis[1].severity == Severity.mild

    assert analysis.urgency == Urgency.medium
    assert analysis.risk_factors == ["age over 65, asthma"]
    assert analysis.recommendations == [
        "Rest and drink plenty of fluids",
        "See a doctor if fever lasts more than 3 days"
    ]


def test_parse_condition_with_indented_details():
    reply = (
        "POTENTIAL CONDITIONS:\n"
        "- **Migraine**\n"
        "    - Throbbing headache with light sensitivity\n"
        "    - Severity: Severe\n"
    )
    analysis = parse_symptom_analysis(reply)

    assert len(analysis.analysis) == 1
    migraine = analysis.analysis[0]
    assert migraine.condition == "Migraine"
    assert migraine.description == "Throbbing headache with light sensitivity Severity: Severe"
    assert migraine.severity == Severity.severe
    assert migraine.confidence == 0.75


def test_parse_unstructured_reply_uses_defaults():
    analysis = parse_symptom_analysis("I am not sure what this could be.")

    assert analysis.analysis[0].condition == "Common condition based on symptoms"
    assert analysis.analysis[0].confidence == 0.75
    assert analysis.urgency == Urgency.low
    assert analysis.risk_factors == ["Age-related factors", "Lifestyle considerations"]
    assert analysis.recommendations == []


def test_detect_urgency_prefers_cautious_level():
    assert detect_urgency("Urgency: High, but Low if fever drops") == Urgency.high
    assert detect_urgency("Seek IMMEDIATE care") == Urgency.immediate
    assert detect_urgency("(Low/Medium/High/Immediate)") == Urgency.low
    assert detect_urgency(None) == Urgency.low


def test_extract_risk_factors_skips_urgency_line():
    block = "Urgency level: high risk\n- Key risk factors: smoking"
    assert extract_risk_factors(block) == ["smoking"]


def test_validate_symptoms():
    assert validate_symptoms("  headache and fever  ") == "headache and fever"
    with pytest.raises(ValueError, match="at least 10 characters"):
        validate_symptoms("cough")


def test_analyze_route(client, fake_llm):
    calls = fake_llm(REPLY)

    response = client.post("/v1/symptoms/analyze", json={"symptoms": "fever, chills and body aches"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["urgency"] == "Medium"
    assert body["data"]["analysis"][0]["condition"] == "Influenza"
    assert calls.calls[0]["temperature"] == 0.3
    assert calls.calls[0]["max_output_tokens"] == 1500
    assert "fever, chills and body aches" in calls.calls[0]["input"]


def test_analyze_route_short_symptoms(client):
    response = client.post("/v1/symptoms/analyze", json={"symptoms": "  cough  "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please describe your symptoms in at least 10 characters."


def test_analyze_route_model_failure_returns_fallback(client, fake_llm):
    fake_llm(RuntimeError("model down"))

    response = client.post("/v1/symptoms/analyze", json={"symptoms": "sharp pain in lower back"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["analysis"][0]["condition"] == "Symptom evaluation required"
    assert "sharp pain in lower back" in data["analysis"][0]["description"]
    assert data["analysis"][0]["confidence"] == 0.6
    assert data["urgency"] == "Medium"
    assert len(data["recommendations"]) == 4
