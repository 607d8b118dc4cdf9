from app.core.llm import generate_text
from app.core.parsing import find_keyword
from app.database.mongo import log_error
from prompts.prompts import MENTAL_HEALTH_COMPANION_PROMPT
from .schemas import Mood
from typing import List, Tuple
import re

HISTORY_LIMIT = 10
_MOOD_LINE = re.compile(r"^[ \t*_#-]*mood[ \t*_]*:(.*)$", re.IGNORECASE | re.MULTILINE)


def format_history(history: List[str], limit: int = HISTORY_LIMIT) -> str:
    """Render the most recent history entries as a bullet list."""
    recent = [entry.strip() for entry in history if entry and entry.strip()][-limit:]
    if not recent:
        return "- (no previous messages)"
    return "\n".join(f"- {entry}" for entry in recent)


def split_mood(reply: str) -> Tuple[str, Mood]:
    """
    Separate the trailing "MOOD: <value>" line from the reply.

    Returns:
        Tuple[str, Mood]: Reply without the mood line, and the parsed mood (Neutral if absent)
    """
    matches = list(_MOOD_LINE.finditer(reply))
    if not matches:
        return reply.strip(), Mood.neutral

    last = matches[-1]
    # "Mixed" first: a reply may list several moods when feelings are mixed
    keyword = find_keyword(last.group(1), [Mood.mixed.value, Mood.negative.value, Mood.positive.value, Mood.neutral.value])
    mood = Mood(keyword) if keyword else Mood.neutral

    text = (reply[:last.start()] + reply[last.end():]).strip()
    return text, mood


async def talk_to_companion(prompt: str, history: List[str]) -> Tuple[str, Mood]:
    """
    Get a supportive reply and a mood assessment from the companion.

    Args:
        prompt: User's latest message
        history: Conversation history, oldest first

    Returns:
        Tuple[str, Mood]: Reply text and mood

    Raises:
        ValueError: If the message is empty
        Exception: If the model call fails or the reply is empty
    """
    message = (prompt or "").strip()
    if not message:
        raise ValueError("Please enter a message.")

    try:
        reply = await generate_text(
            MENTAL_HEALTH_COMPANION_PROMPT.format(
                history=format_history(history),
                prompt=message
            ),
            temperature=0.7
        )

        text, mood = split_mood(reply)
        if not text:
            raise Exception("Failed to get a response from the companion.")
        return text, mood

    except Exception as e:
        await log_error(
            error=e,
            location="companion/utils.py - talk_to_companion",
            additional_info={
                "prompt_length": len(message),
                "history_length": len(history)
            }
        )
        raise
