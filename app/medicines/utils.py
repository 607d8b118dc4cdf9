from app.core.llm import generate_text
from app.core.parsing import extract_section
from app.database.mongo import log_error
from prompts.prompts import MEDICINE_INFO_PROMPT
from .schemas import MedicineInfo
from typing import Optional

MIN_MEDICINE_NAME_LENGTH = 2
NOT_AVAILABLE = "Information not available."
DEFAULT_DISCLAIMER = (
    "This information is for educational purposes only and is not a substitute for "
    "professional medical advice. Consult a healthcare provider for any health concerns "
    "or before taking any medication."
)

SECTIONS = ["USAGE", "DOSAGE", "SIDE EFFECTS", "PRECAUTIONS", "DISCLAIMER"]


def validate_medicine_name(medicine_name: Optional[str]) -> str:
    cleaned = (medicine_name or "").strip()
    if len(cleaned) < MIN_MEDICINE_NAME_LENGTH:
        raise ValueError("Medicine name must be at least 2 characters.")
    return cleaned


def _section(reply: str, heading: str) -> Optional[str]:
    others = [s for s in SECTIONS if s != heading]
    return extract_section(reply, heading, others) or None


def parse_medicine_info(reply: str) -> MedicineInfo:
    """
    Slice the model reply into MedicineInfo.

    Raises:
        Exception: If none of the informational sections are present
    """
    usage = _section(reply, "USAGE")
    dosage = _section(reply, "DOSAGE")
    side_effects = _section(reply, "SIDE EFFECTS")
    precautions = _section(reply, "PRECAUTIONS")

    if not any([usage, dosage, side_effects, precautions]):
        raise Exception("Failed to get information for the specified medicine.")

    return MedicineInfo(
        usage=usage or NOT_AVAILABLE,
        dosage=dosage or NOT_AVAILABLE,
        side_effects=side_effects or NOT_AVAILABLE,
        precautions=precautions or NOT_AVAILABLE,
        disclaimer=_section(reply, "DISCLAIMER") or DEFAULT_DISCLAIMER
    )


async def get_medicine_info(medicine_name: str) -> MedicineInfo:
    """
    Look up usage, dosage, side effects and precautions for a medicine.

    Args:
        medicine_name: Medicine to look up

    Returns:
        MedicineInfo: Parsed information

    Raises:
        ValueError: If the name is too short
        Exception: If the model call fails or the reply has no usable sections
    """
    cleaned_name = validate_medicine_name(medicine_name)

    try:
        reply = await generate_text(
            MEDICINE_INFO_PROMPT.format(medicine_name=cleaned_name),
            temperature=0.2,
            max_output_tokens=1200
        )
        return parse_medicine_info(reply)

    except Exception as e:
        await log_error(
            error=e,
            location="medicines/utils.py - get_medicine_info",
            additional_info={"medicine_name": cleaned_name}
        )
        raise
