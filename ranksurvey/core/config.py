from dotenv import load_dotenv
load_dotenv()
import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    """
    Runtime configuration for the survey submission service.

    Values can be overridden via environment variables or a local `.env` file.
    """

    # Remote collection endpoint (e.g. a spreadsheet web-app deployment URL).
    SUBMISSION_ENDPOINT_URL: str = os.getenv("SUBMISSION_ENDPOINT_URL", "")

    # Delivery pipeline tuning
    SUBMIT_MAX_RETRIES: int = int(os.getenv("SUBMIT_MAX_RETRIES", "3"))
    SUBMIT_TIMEOUT_MS: int = int(os.getenv("SUBMIT_TIMEOUT_MS", "5000"))
    SUBMIT_INITIAL_RETRY_DELAY_MS: int = int(
        os.getenv("SUBMIT_INITIAL_RETRY_DELAY_MS", "1000")
    )

    # Free-text limits
    MAX_TEXT_LENGTH: int = int(os.getenv("MAX_TEXT_LENGTH", "5000"))
    MAX_COMMENT_LENGTH: int = int(os.getenv("MAX_COMMENT_LENGTH", "10000"))

    # In-memory session registry size
    SESSION_CAPACITY: int = int(os.getenv("SESSION_CAPACITY", "200"))

    CORS_ALLOW_ORIGINS: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173")
        )
    )


settings = Settings()
