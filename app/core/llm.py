# core/llm.py
from openai import AsyncOpenAI
from typing import Optional, Any, Dict, List
from .config import settings
from app.database.mongo import log_error

# Initialize client (note: This will be initialized once and reused)
client: AsyncOpenAI | None = None

async def get_openai_client():
    """
    Get or initialize the OpenAI client.
    Returns the existing client if already initialized, otherwise creates a new one.
    """
    global client
    try:
        if client is None:
            client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
        return client

    except Exception as e:
        await log_error(e, "core/llm.py - get_openai_client")
        raise e

def build_model_input(prompt: str, image_data_uri: Optional[str] = None) -> Any:
    """
    Build the Responses API input.
    Plain prompts are sent as a string, image prompts as a single user message
    carrying an input_text and an input_image part.
    """
    if not image_data_uri:
        return prompt

    content: List[Dict[str, str]] = [
        {"type": "input_text", "text": prompt},
        {"type": "input_image", "image_url": image_data_uri},
    ]
    return [{"role": "user", "content": content}]

async def generate_text(
    prompt: str,
    temperature: float = 0.3,
    max_output_tokens: Optional[int] = None,
    image_data_uri: Optional[str] = None,
    model: Optional[str] = None
) -> str:
    """
    Send a prompt to the model and return the stripped reply text.

    Args:
        prompt: Fully rendered prompt template
        temperature: Sampling temperature
        max_output_tokens: Optional cap on reply length
        image_data_uri: Optional data URI attached as an input image
        model: Model override, defaults to settings.OPENAI_MODEL

    Returns:
        str: Model reply text

    Raises:
        Exception: If the API call fails or the model returns nothing
    """
    try:
        openai_client = await get_openai_client()

        request: Dict[str, Any] = {
            "model": model or settings.OPENAI_MODEL,
            "input": build_model_input(prompt, image_data_uri),
            "temperature": temperature,
        }
        if max_output_tokens:
            request["max_output_tokens"] = max_output_tokens

        response = await openai_client.responses.create(**request)

        generated_text: str = (response.output_text or "").strip()
        if not generated_text:
            raise Exception("OpenAI returned empty response")

        return generated_text

    except Exception as e:
        await log_error(
            error=e,
            location="core/llm.py - generate_text",
            additional_info={
                "model": model or settings.OPENAI_MODEL,
                "prompt_length": len(prompt),
                "has_image": bool(image_data_uri)
            }
        )
        raise
