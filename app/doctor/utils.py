from app.core.llm import generate_text
from app.database.mongo import log_error
from prompts.prompts import DOCTOR_AGENT_PROMPT
import re

# "As an AI doctor, ..." / "As an AI, I ..." openers the prompt asks the model to skip
_AI_DISCLAIMER_OPENER = re.compile(
    r"^\s*as\s+an?\s+(?:ai|artificial\s+intelligence)(?:\s+(?:doctor|assistant|language\s+model))?\s*,\s*",
    re.IGNORECASE
)


def strip_ai_opener(text: str) -> str:
    """Remove a leading "As an AI doctor," phrase and re-capitalize the reply."""
    stripped = _AI_DISCLAIMER_OPENER.sub("", text, count=1).strip()
    if not stripped:
        return text.strip()
    return stripped[0].upper() + stripped[1:]


async def talk_to_doctor(prompt: str) -> str:
    """
    Get a short conversational answer from the AI doctor.

    Args:
        prompt: User's message

    Returns:
        str: 2-3 sentence reply

    Raises:
        ValueError: If the message is empty
        Exception: If the model call fails
    """
    message = (prompt or "").strip()
    if not message:
        raise ValueError("Please enter a message for the doctor.")

    try:
        reply = await generate_text(
            DOCTOR_AGENT_PROMPT.format(prompt=message),
            temperature=0.7
        )
        return strip_ai_opener(reply)

    except Exception as e:
        await log_error(
            error=e,
            location="doctor/utils.py - talk_to_doctor",
            additional_info={"prompt_length": len(message)}
        )
        raise
