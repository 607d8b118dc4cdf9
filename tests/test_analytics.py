from app.analytics.schemas import PatientData, RiskLevel
from app.analytics.utils import (
    calculate_bmi, build_health_analytics_prompt, detect_risk_level, parse_health_analytics,
    DEFAULT_SCORE_COMPONENTS
)

REPLY = """### RISK ASSESSMENT:
- Overall health risk level (Low/Medium/High): Moderate
- Risk score: 58
- Key risk factors:
  - Elevated blood pressure
  - Sedentary lifestyle

### PREDICTIVE INSIGHTS:
- Blood pressure likely to rise without lifestyle changes
- Weight gain of 1-2 kg expected over 6 months

### RECOMMENDATIONS:
- Start 30 minutes of brisk walking daily
- Reduce salt intake

### HEALTH SCORE:
- Current health score: 68
- Projected health score: 80 (with interventions)
"""

PATIENT = {
    "demographics": {"age": 52, "gender": "Male", "height": 175, "weight": 82},
    "vitals": {"blood_pressure": "145/92", "heart_rate": 78},
    "lab_results": {"blood_sugar": 105, "cholesterol": {"total": 220, "ldl": 140}},
    "lifestyle": {"smoking": True, "exercise": "rarely", "sleep": 6},
    "medical_history": {"conditions": ["Hypertension"], "family_history": ["Heart disease", "Diabetes"]}
}


def test_calculate_bmi():
    assert calculate_bmi(82, 175) == 26.8
    assert calculate_bmi(None, 175) is None
    assert calculate_bmi(70, None) is None


def test_build_prompt_renders_patient_fields():
    patient = PatientData.model_validate(PATIENT)

    prompt = build_health_analytics_prompt(patient, "cardiovascular", 26.8)

    assert "- Age: 52" in prompt
    assert "- BMI: 26.8" in prompt
    assert "- Blood Pressure: 145/92" in prompt
    assert "- Temperature: Not specified°C" in prompt
    assert '- Cholesterol: {"total": 220, "ldl": 140}' in prompt
    assert "- Kidney Function: Not specified" in prompt
    assert "- Smoking: Yes" in prompt
    assert "- Medications: None" in prompt
    assert "- Family History: Heart disease, Diabetes" in prompt
    assert "ANALYSIS TYPE: cardiovascular" in prompt


def test_detect_risk_level():
    assert detect_risk_level("Overall health risk level (Low/Medium/High): Moderate") == RiskLevel.medium
    assert detect_risk_level("Risk level: HIGH") == RiskLevel.high
    assert detect_risk_level("no level given") == RiskLevel.low
    assert detect_risk_level(None) == RiskLevel.low


def test_parse_health_analytics():
    analytics = parse_health_analytics(REPLY, 26.8)

    assert analytics.bmi == 26.8
    risk = analytics.risk_assessment
    assert risk.overall_risk == RiskLevel.medium
    assert risk.risk_score == 58
    assert risk.risk_factors == ["Elevated blood pressure", "Sedentary lifestyle"]
    assert analytics.predictive_insights.short_term == [
        "Blood pressure likely to rise without lifestyle changes",
        "Weight gain of 1-2 kg expected over 6 months"
    ]
    assert analytics.recommendations.immediate == [
        "Start 30 minutes of brisk walking daily",
        "Reduce salt intake"
    ]
    assert analytics.health_score.current == 68
    assert analytics.health_score.projected == 80
    assert analytics.health_score.components == DEFAULT_SCORE_COMPONENTS


def test_parse_health_analytics_defaults():
    analytics = parse_health_analytics("Everything looks fine.", None)

    assert analytics.bmi is None
    assert analytics.risk_assessment.overall_risk == RiskLevel.low
    assert analytics.risk_assessment.risk_score == 65
    assert analytics.health_score.current == 75
    assert analytics.health_score.projected == 85
    assert analytics.recommendations.screening == ["Annual health checkup recommended"]


def test_health_route(client, fake_llm):
    calls = fake_llm(REPLY)

    response = client.post("/v1/analytics/health", json={"patient_data": PATIENT})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["bmi"] == 26.8
    assert data["risk_assessment"]["overall_risk"] == "medium"
    assert "ANALYSIS TYPE: comprehensive" in calls.calls[0]["input"]


def test_health_route_model_failure(client, fake_llm):
    fake_llm(RuntimeError("model down"))

    response = client.post("/v1/analytics/health", json={"patient_data": {}})

    assert response.status_code == 500
    assert response.json()["detail"] == "Unable to complete health analysis. Please try again later."
