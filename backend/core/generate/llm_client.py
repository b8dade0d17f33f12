import logging
import httpx
from typing import Any, Dict, Optional
from pydantic import ValidationError
from config.settings import settings, GeminiConfig
from core.errors import TransportError
from models.gemini import ProviderErrorBody

logger = logging.getLogger(__name__)

class GeminiClient:
    """
    Gemini generateContent API client.
    One blocking POST per call: no retries, no streaming, no fallback model.
    """

    def __init__(self, api_key: Optional[str] = None, config: Optional[GeminiConfig] = None):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.config = config or settings.gemini
        self.url = (
            f"{self.config.base_url.rstrip('/')}/{self.config.api_version}"
            f"/models/{self.config.model}:generateContent"
        )
        self.headers = {"Content-Type": "application/json"}

    def generate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POSTs the payload and returns the parsed JSON body.
        Raises TransportError on connection failure or a non-2xx status.
        """
        if not self.api_key:
            logger.warning("GEMINI_API_KEY is not set. The provider will likely reject the request.")

        try:
            with httpx.Client(timeout=self.config.timeout) as client:
                response = client.post(
                    self.url,
                    params={"key": self.api_key},
                    headers=self.headers,
                    json=payload
                )
        except httpx.HTTPError as e:
            logger.error(f"Request to {self.config.model} failed: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(f"Gemini API returned {response.status_code}: {message}")
            raise TransportError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Gemini API returned a body that is not JSON: {e}")
            raise TransportError(f"Invalid JSON in API response: {e}", status_code=response.status_code) from e

    def _error_message(self, response: httpx.Response) -> str:
        """Provider's error.message when present, otherwise the generic fallback."""
        fallback = settings.ui.transport_fallback_message
        try:
            body = ProviderErrorBody.model_validate(response.json())
        except (ValueError, ValidationError):
            return fallback

        if body.error and body.error.message:
            return body.error.message
        return fallback
