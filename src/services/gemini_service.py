import google.generativeai as genai
import logging
from typing import List, Optional
from src.config import get_settings
from src.models.chat import ProviderTurn
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_not_exception_type
)

settings = get_settings()


class MissingAPIKeyError(RuntimeError):
    """Raised when GEMINI_API_KEY is not configured"""


def _stop_after_configured_attempts(retry_state) -> bool:
    return stop_after_attempt(max(get_settings().gemini_max_attempts, 1))(retry_state)


def _configured_backoff(retry_state) -> float:
    current = get_settings()
    return wait_exponential(multiplier=2, min=current.retry_min_wait, max=current.retry_max_wait)(retry_state)


class GeminiServices:
    """Gemini chat service"""

    def __init__(self):
        self.generation_config = {
            "temperature": settings.gemini_temperature,
            "top_p": 0.95,
            "top_k": 40,
            "max_output_tokens": settings.gemini_max_tokens,
        }

        self.safety_settings = [
            {
                "category": "HARM_CATEGORY_HARASSMENT",
                "threshold": "BLOCK_ONLY_HIGH"
            },
            {
                "category": "HARM_CATEGORY_HATE_SPEECH",
                "threshold": "BLOCK_ONLY_HIGH"
            },
            {
                "category": "HARM_CATEGORY_SEXUALLY_EXPLICIT",
                "threshold": "BLOCK_ONLY_HIGH"
            },
            {
                "category": "HARM_CATEGORY_DANGEROUS_CONTENT",
                "threshold": "BLOCK_ONLY_HIGH"
            }
        ]

    def _get_model(self) -> genai.GenerativeModel:
        """Configure the SDK with the current key and build the model"""

        # Key is read on every call so rotating it needs no restart
        api_key = get_settings().gemini_api_key
        if not api_key:
            raise MissingAPIKeyError("GEMINI_API_KEY is not set")

        genai.configure(api_key=api_key)
        return genai.GenerativeModel(settings.gemini_model)

    @retry(
        stop=_stop_after_configured_attempts,
        wait=_configured_backoff,
        retry=retry_if_not_exception_type(MissingAPIKeyError),
        reraise=True
    )
    async def send_chat(
        self,
        history: List[ProviderTurn],
        message: str,
        temperature: Optional[float] = None
    ) -> str:
        """Open a chat over the given history and send one message"""

        try:
            config = self.generation_config.copy()
            if temperature is not None:
                config["temperature"] = temperature

            model = self._get_model()
            chat = model.start_chat(history=history)

            logging.info(f"Sending message to Gemini ({len(history)} history turns)")
            logging.debug("Message: " + message)

            response = await chat.send_message_async(
                message,
                generation_config=config,
                safety_settings=self.safety_settings
            )

            if not response.parts:
                raise ValueError("Empty response from Gemini")

            text = response.text
            logging.info(f"Gemini generated {len(text)} characters")

            return text

        except Exception as e:
            logging.error(f"Gemini API error: {str(e)}")
            raise

# Singleton instance
_gemini_service = None

def get_gemini_service() -> GeminiServices:
    """
    Get or create GeminiServices singleton
    """

    global _gemini_service
    if _gemini_service is None:
        _gemini_service = GeminiServices()
    return _gemini_service
