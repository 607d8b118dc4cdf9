"""
Skin lesion analyzer utilities
"""
from app.core.config import settings
from app.core.llm import generate_text
from app.core.parsing import extract_section
from app.database.mongo import log_error
from prompts.prompts import SKIN_LESION_ANALYZER_PROMPT
from .schemas import SkinLesionAnalysis
from typing import Optional
import base64
import binascii
import re

_DATA_URI = re.compile(r"^data:(image/[A-Za-z0-9.+-]+);base64,(.+)$", re.DOTALL | re.IGNORECASE)

SECTIONS = ["POTENTIAL CONDITION", "DESCRIPTION", "NEXT STEPS"]
DEFAULT_CONDITION = "Unable to determine from the photo"
DEFAULT_DESCRIPTION = (
    "This is not a medical diagnosis. The photo could not be assessed reliably; "
    "urgency is unknown, so monitor the lesion for changes."
)
DEFAULT_NEXT_STEPS = "Consult a dermatologist or healthcare professional for an in-person examination."


def validate_photo_data_uri(photo_data_uri: str, max_bytes: Optional[int] = None) -> str:
    """
    Validate an image data URI.

    Args:
        photo_data_uri: "data:image/<type>;base64,<payload>"
        max_bytes: Maximum decoded size, defaults to settings.MAX_IMAGE_BYTES

    Returns:
        str: Normalized data URI (whitespace removed from the payload)

    Raises:
        ValueError: If the URI is malformed, not an image, not base64 or too large
    """
    match = _DATA_URI.match((photo_data_uri or "").strip())
    if not match:
        raise ValueError("Please upload an image file as a data URI ('data:image/<type>;base64,<data>').")

    mime_type = match.group(1).lower()
    payload = re.sub(r"\s+", "", match.group(2))

    try:
        decoded = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Image data is not valid base64.")

    check_image_size(len(decoded), max_bytes)

    return f"data:{mime_type};base64,{payload}"


def check_image_size(size: int, max_bytes: Optional[int] = None):
    """
    Raises:
        ValueError: If the image is empty or larger than max_bytes (default settings.MAX_IMAGE_BYTES)
    """
    max_bytes = max_bytes or settings.MAX_IMAGE_BYTES
    if size == 0:
        raise ValueError("Image data is empty.")
    if size > max_bytes:
        raise ValueError(f"Image exceeds the maximum size of {max_bytes} bytes.")


def image_bytes_to_data_uri(content: bytes, content_type: str, max_bytes: Optional[int] = None) -> str:
    """Encode uploaded image bytes as a data URI (type and size checked first)."""
    if not content_type or not content_type.lower().startswith("image/"):
        raise ValueError("Please upload an image file.")
    check_image_size(len(content), max_bytes)
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type.lower()};base64,{encoded}"


def _section(reply: str, heading: str):
    others = [s for s in SECTIONS if s != heading]
    return extract_section(reply, heading, others) or None


def parse_skin_lesion_analysis(reply: str) -> SkinLesionAnalysis:
    """Slice the model reply into a SkinLesionAnalysis, with fallback literals."""
    return SkinLesionAnalysis(
        potential_condition=_section(reply, "POTENTIAL CONDITION") or DEFAULT_CONDITION,
        description=_section(reply, "DESCRIPTION") or DEFAULT_DESCRIPTION,
        next_steps=_section(reply, "NEXT STEPS") or DEFAULT_NEXT_STEPS
    )


async def analyze_skin_lesion(photo_data_uri: str) -> SkinLesionAnalysis:
    """
    Run a preliminary analysis of a skin lesion photo with the vision model.

    Args:
        photo_data_uri: Image as a base64 data URI

    Returns:
        SkinLesionAnalysis: Parsed analysis

    Raises:
        ValueError: If the image is invalid
        Exception: If the model call fails
    """
    data_uri = validate_photo_data_uri(photo_data_uri)

    try:
        reply = await generate_text(
            SKIN_LESION_ANALYZER_PROMPT,
            temperature=0.2,
            max_output_tokens=800,
            image_data_uri=data_uri,
            model=settings.OPENAI_VISION_MODEL
        )
        return parse_skin_lesion_analysis(reply)

    except Exception as e:
        await log_error(
            error=e,
            location="skin/utils.py - analyze_skin_lesion",
            additional_info={"data_uri_length": len(data_uri)}
        )
        raise
