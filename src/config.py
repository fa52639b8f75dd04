from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):

    # App Setting
    app_name: str = "AI Interviewer API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Gemini Setting
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-flash-latest"
    gemini_temperature: float = 0.7
    gemini_max_tokens: int = 8192

    # Retry Logic Settings (1 attempt = no retries)
    gemini_max_attempts: int = 1
    retry_min_wait: int = 2
    retry_max_wait: int = 30

    # Conversation Setting (None = replay the full history)
    max_history_turns: Optional[int] = None

    # UI Client Setting
    api_base_url: str = "http://localhost:8000"
    request_timeout: float = 120.0

    # File upload Setting
    max_upload_size: int = 1024 * 1024
    allowed_extensions: list = [".md", ".txt", ".js", ".ts", ".java", ".py", ".json", ".pdf"]

    class Config:
        """Pydantic config"""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

def get_settings() -> Settings:
    return Settings()
