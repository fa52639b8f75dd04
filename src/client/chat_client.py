import logging
from typing import Optional

import requests

from src.config import get_settings
from src.models.chat import ChatRequest


class ChatClientError(Exception):
    """Raised when the chat API cannot produce a reply"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ChatClient:
    """HTTP client for POST /api/chat"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}/api/chat"

    def send(self, request: ChatRequest) -> str:
        """Send the full conversation state, return the reply text"""

        payload = request.model_dump(mode="json", by_alias=True)

        try:
            response = self.session.post(self.chat_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"Chat request failed: {e}")
            raise ChatClientError(f"Could not reach the chat API: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            message = data.get("error") if isinstance(data, dict) else None
            logging.error(f"Chat API returned {response.status_code}: {message}")
            raise ChatClientError(message or f"HTTP {response.status_code}", response.status_code)

        reply = data.get("reply") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise ChatClientError("Malformed reply from chat API", response.status_code)

        return reply
