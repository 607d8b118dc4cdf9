from datetime import date

import pytest

from app.prescriptions.schemas import Gender, PrescriptionRequest
from app.prescriptions.utils import (
    format_prescription_date, parse_medicines, parse_prescription,
    DEFAULT_DISCLAIMER, DEFAULT_PRECAUTIONS
)

REPLY = """DIAGNOSIS: Acute pharyngitis
MEDICINES:
- Paracetamol | 500mg | Three times a day | 5 days
- Lozenges | 1 lozenge | Every 3 hours | As needed
PRECAUTIONS:
- Drink warm fluids
- Rest your voice
DISCLAIMER: This is an AI-generated sample, not a real prescription.
"""

REQUEST = PrescriptionRequest(
    name="  Jane Doe ",
    age=34,
    gender=Gender.female,
    symptoms="sore throat and mild fever for two days"
)


def test_format_prescription_date():
    assert format_prescription_date(date(2026, 3, 5)) == "March 5, 2026"
    assert format_prescription_date(date(2025, 12, 25)) == "December 25, 2025"


def test_parse_medicines_pads_missing_fields():
    medicines = parse_medicines("- Ibuprofen | 200mg\n- Saline spray |  | Twice a day")

    assert medicines[0].name == "Ibuprofen"
    assert medicines[0].dosage == "200mg"
    assert medicines[0].frequency == "Not specified"
    assert medicines[0].duration == "Not specified"
    assert medicines[1].dosage == "Not specified"
    assert medicines[1].frequency == "Twice a day"


def test_parse_prescription():
    prescription = parse_prescription(REPLY, REQUEST, date(2026, 3, 5))

    assert prescription.patient_name == "Jane Doe"
    assert prescription.age == 34
    assert prescription.gender == Gender.female
    assert prescription.date == "March 5, 2026"
    assert prescription.diagnosis == "Acute pharyngitis"
    assert [m.name for m in prescription.medicines] == ["Paracetamol", "Lozenges"]
    assert prescription.medicines[0].frequency == "Three times a day"
    assert prescription.precautions == ["Drink warm fluids", "Rest your voice"]
    assert prescription.disclaimer == "This is an AI-generated sample, not a real prescription."


def test_parse_prescription_defaults():
    prescription = parse_prescription("MEDICINES:\n- Cetirizine | 10mg | Once daily | 7 days", REQUEST, date(2026, 1, 1))

    assert prescription.precautions == DEFAULT_PRECAUTIONS
    assert prescription.disclaimer == DEFAULT_DISCLAIMER


def test_parse_prescription_without_medicines_fails():
    with pytest.raises(Exception, match="Prescription generation failed."):
        parse_prescription("DIAGNOSIS: Unclear", REQUEST, date(2026, 1, 1))


def test_generate_route(client, fake_llm):
    calls = fake_llm(REPLY)

    response = client.post("/v1/prescriptions/generate", json={
        "name": "Jane Doe",
        "age": 34,
        "gender": "Female",
        "symptoms": "sore throat and mild fever for two days"
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["date"] == format_prescription_date(date.today())
    assert len(data["medicines"]) == 2
    assert "- Gender: Female" in calls.calls[0]["input"]


@pytest.mark.parametrize("payload, detail", [
    ({"name": "J", "symptoms": "sore throat and fever"}, "Name must be at least 2 characters."),
    ({"name": "Jane", "symptoms": "cough"}, "Symptoms must be at least 10 characters."),
])
def test_generate_route_validation(client, payload, detail):
    response = client.post("/v1/prescriptions/generate", json={"age": 30, "gender": "Other", **payload})

    assert response.status_code == 400
    assert response.json()["detail"] == detail


def test_generate_route_rejects_unknown_gender(client):
    response = client.post("/v1/prescriptions/generate", json={
        "name": "Jane", "age": 30, "gender": "Unknown", "symptoms": "sore throat and fever"
    })

    assert response.status_code == 422


def test_generate_route_no_medicines(client, fake_llm):
    fake_llm("DIAGNOSIS: Needs examination")

    response = client.post("/v1/prescriptions/generate", json={
        "name": "Jane", "age": 30, "gender": "Female", "symptoms": "sore throat and fever"
    })

    assert response.status_code == 500
