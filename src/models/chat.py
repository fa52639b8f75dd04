from pydantic import BaseModel, Field, AliasChoices, ConfigDict, field_validator
from enum import Enum
from typing import Optional, List, Literal, TypedDict

class Speaker(str, Enum):
    """Who produced a transcript turn"""
    USER = "user"
    ASSISTANT = "assistant"


class Mode(str, Enum):
    """
    Session mode. JOB simulates a recruiter, PROJECT a strict evaluator
    for a final project defense.
    """
    JOB = "job"
    PROJECT = "project"


# Legacy/provider role names accepted for assistant turns
ASSISTANT_ALIASES = {"assistant", "ai", "model"}


class Turn(BaseModel):
    """One message in the transcript"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    speaker: Speaker = Field(..., validation_alias=AliasChoices("speaker", "role"))
    text: str = Field(..., validation_alias=AliasChoices("text", "content"))

    @field_validator("speaker", mode="before")
    @classmethod
    def normalize_speaker(cls, v):
        if not isinstance(v, str):
            return v
        name = v.strip().lower()
        if name in ASSISTANT_ALIASES:
            return Speaker.ASSISTANT
        return name


class ChatRequest(BaseModel):
    """Chat request: full client state resent on every turn"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "history": [
                    {"speaker": "user", "text": "I built it with FastAPI and Postgres."},
                    {"speaker": "assistant", "text": "Why did you choose Postgres over SQLite?"}
                ],
                "message": "Because we needed concurrent writes.",
                "context": "Inventory Manager",
                "mode": "project",
                "details": "Python 3.12, FastAPI, SQLAlchemy",
                "repositoryLink": "https://github.com/user/inventory"
            }
        },
    )

    history: List[Turn] = Field(default_factory=list)
    message: str = Field(...)
    context: str = ""
    mode: Mode = Mode.PROJECT
    details: str = ""
    repository_link: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("repositoryLink", "githubUrl", "repository_link"),
        serialization_alias="repositoryLink",
    )

    @field_validator("mode", mode="before")
    @classmethod
    def resolve_mode(cls, v):
        # Anything that is not explicitly "job" is a project defense
        if isinstance(v, Mode):
            return v
        if isinstance(v, str) and v.strip().lower() == Mode.JOB.value:
            return Mode.JOB
        return Mode.PROJECT

    @field_validator("repository_link")
    @classmethod
    def blank_link_is_none(cls, v):
        if v is None or len(v.strip()) == 0:
            return None
        return v.strip()

    @field_validator("context", "details", mode="before")
    @classmethod
    def none_is_empty(cls, v):
        return "" if v is None else v


class ChatResponse(BaseModel):
    """Successful reply"""
    reply: str


class ErrorResponse(BaseModel):
    """Error body returned to the client"""
    error: str


class ProviderPart(TypedDict):
    text: str


class ProviderTurn(TypedDict):
    """Turn in the provider's two-party vocabulary (user / model)"""
    role: Literal["user", "model"]
    parts: List[ProviderPart]
