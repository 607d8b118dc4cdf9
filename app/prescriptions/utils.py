from app.core.llm import generate_text
from app.core.parsing import extract_section, split_lines
from app.database.mongo import log_error
from prompts.prompts import PRESCRIPTION_GENERATOR_PROMPT
from .schemas import PrescriptionRequest, Prescription, PrescribedMedicine
from datetime import date
from typing import List, Optional

SECTIONS = ["DIAGNOSIS", "MEDICINES", "PRECAUTIONS", "DISCLAIMER"]
NOT_SPECIFIED = "Not specified"
DEFAULT_DIAGNOSIS = "Diagnosis requires evaluation by a healthcare professional"
DEFAULT_PRECAUTIONS = [
    "Rest and stay hydrated",
    "Seek medical attention if symptoms worsen or persist"
]
DEFAULT_DISCLAIMER = (
    "This is an AI-generated sample, NOT a real medical prescription. "
    "You MUST consult a qualified healthcare professional before taking any medication "
    "or making any health decisions."
)


def validate_prescription_request(request: PrescriptionRequest) -> None:
    """
    Raises:
        ValueError: If the name or symptom description is too short
    """
    if len(request.name.strip()) < 2:
        raise ValueError("Name must be at least 2 characters.")
    if len(request.symptoms.strip()) < 10:
        raise ValueError("Symptoms must be at least 10 characters.")


def format_prescription_date(day: date) -> str:
    """Format as "Month Day, Year" without a zero-padded day (e.g. "March 5, 2026")."""
    return f"{day:%B} {day.day}, {day.year}"


def _section(reply: str, heading: str) -> Optional[str]:
    others = [s for s in SECTIONS if s != heading]
    return extract_section(reply, heading, others) or None


def parse_medicines(block: Optional[str]) -> List[PrescribedMedicine]:
    """Parse "name | dosage | frequency | duration" lines."""
    medicines: List[PrescribedMedicine] = []
    for line in split_lines(block):
        parts = [part.strip() for part in line.split("|")]
        if not parts[0]:
            continue
        parts += [NOT_SPECIFIED] * (4 - len(parts))
        name, dosage, frequency, duration = [part or NOT_SPECIFIED for part in parts[:4]]
        medicines.append(PrescribedMedicine(
            name=name,
            dosage=dosage,
            frequency=frequency,
            duration=duration
        ))
    return medicines


def parse_prescription(reply: str, request: PrescriptionRequest, today: date) -> Prescription:
    """
    Slice the model reply into a Prescription.

    Raises:
        Exception: If no medicines could be parsed
    """
    medicines = parse_medicines(_section(reply, "MEDICINES"))
    if not medicines:
        raise Exception("Prescription generation failed.")

    return Prescription(
        patient_name=request.name.strip(),
        age=request.age,
        gender=request.gender,
        date=format_prescription_date(today),
        diagnosis=_section(reply, "DIAGNOSIS") or DEFAULT_DIAGNOSIS,
        medicines=medicines,
        precautions=split_lines(_section(reply, "PRECAUTIONS")) or list(DEFAULT_PRECAUTIONS),
        disclaimer=_section(reply, "DISCLAIMER") or DEFAULT_DISCLAIMER
    )


async def generate_prescription(request: PrescriptionRequest) -> Prescription:
    """
    Generate a sample prescription from the patient's details and symptoms.

    Args:
        request: PrescriptionRequest

    Returns:
        Prescription: Parsed sample prescription, dated today

    Raises:
        ValueError: If the request fails validation
        Exception: If the model call fails or no medicines are returned
    """
    validate_prescription_request(request)

    try:
        reply = await generate_text(
            PRESCRIPTION_GENERATOR_PROMPT.format(
                name=request.name.strip(),
                age=request.age,
                gender=request.gender.value,
                symptoms=request.symptoms.strip()
            ),
            temperature=0.3,
            max_output_tokens=1200
        )
        return parse_prescription(reply, request, date.today())

    except Exception as e:
        await log_error(
            error=e,
            location="prescriptions/utils.py - generate_prescription",
            additional_info={
                "age": request.age,
                "gender": request.gender.value,
                "symptoms_length": len(request.symptoms)
            }
        )
        raise
