from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional

class Settings(BaseSettings):
    # OpenAI
    OPENAI_API_KEY: str
    OPENAI_MODEL: str = "gpt-4.1-mini"
    OPENAI_VISION_MODEL: str = "gpt-4.1-mini"

    # Error logs (console only when unset)
    MONGO_URI: Optional[str] = None
    MONGO_DB_NAME: str = "HealthAssistant"

    # Mock pharmacy / payments
    PAYMENT_PROCESSING_DELAY_SECONDS: float = 2.0
    DEFAULT_CURRENCY: str = "INR"

    # Skin lesion uploads
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent.parent / ".env",
        extra="ignore"
    )

settings = Settings()
