import logging
from typing import Any
from pydantic import ValidationError

from core.errors import MalformedResponseError
from models.gemini import GenerateContentResponse

logger = logging.getLogger(__name__)

def extract_summary(body: Any) -> str:
    """
    Returns candidates[0].content.parts[0].text from a generateContent body.
    Raises MalformedResponseError (and logs the body) if any link is missing or empty.
    """
    try:
        parsed = GenerateContentResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"Unexpected API response structure: {body!r} ({e.error_count()} validation errors)")
        raise MalformedResponseError("Unexpected API response structure.", payload=body) from e

    return parsed.candidates[0].content.parts[0].text
