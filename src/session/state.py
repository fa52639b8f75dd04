"""
Browser session state for the interview UI.

The whole UI is driven by one immutable SessionState value. Widgets emit
events and `reduce` is the only place a new state is produced.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from src.models.chat import ChatRequest, Mode, Speaker, Turn
from src.prompts.system_instruction import build_greeting
from src.services.upload_service import file_block


class SessionStatus(str, Enum):
    NOT_STARTED = "not-started"
    ACTIVE = "active"


@dataclass(frozen=True)
class SessionState:
    mode: Mode = Mode.JOB
    context: str = ""
    details: str = ""
    repository_link: str = ""
    status: SessionStatus = SessionStatus.NOT_STARTED
    transcript: Tuple[Turn, ...] = field(default_factory=tuple)
    pending: bool = False
    last_error: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def can_start(self) -> bool:
        return bool(self.context.strip())


# Events

@dataclass(frozen=True)
class ModeSelected:
    mode: Mode


@dataclass(frozen=True)
class ContextChanged:
    context: str


@dataclass(frozen=True)
class DetailsChanged:
    details: str


@dataclass(frozen=True)
class RepositoryLinkChanged:
    repository_link: str


@dataclass(frozen=True)
class FileLoaded:
    filename: str
    text: str


@dataclass(frozen=True)
class SessionStarted:
    pass


@dataclass(frozen=True)
class TurnSubmitted:
    text: str


@dataclass(frozen=True)
class ReplyReceived:
    text: str


@dataclass(frozen=True)
class RequestFailed:
    error: str


@dataclass(frozen=True)
class SessionExited:
    pass


def reduce(state: SessionState, event) -> SessionState:
    """Single update function: state + event -> new state"""

    if isinstance(event, ModeSelected):
        return replace(state, mode=event.mode)

    if isinstance(event, ContextChanged):
        return replace(state, context=event.context)

    if isinstance(event, DetailsChanged):
        return replace(state, details=event.details)

    if isinstance(event, RepositoryLinkChanged):
        return replace(state, repository_link=event.repository_link)

    if isinstance(event, FileLoaded):
        return replace(state, details=state.details + file_block(event.filename, event.text))

    if isinstance(event, SessionStarted):
        if not state.can_start:
            return state

        link = state.repository_link.strip() or None
        greeting = Turn(
            speaker=Speaker.ASSISTANT,
            text=build_greeting(state.mode, state.context, link)
        )
        return replace(
            state,
            status=SessionStatus.ACTIVE,
            transcript=(greeting,),
            pending=False,
            last_error=None
        )

    if isinstance(event, TurnSubmitted):
        # Blank input, inactive session or a request in flight: ignored
        if not event.text.strip() or not state.is_active or state.pending:
            return state

        turn = Turn(speaker=Speaker.USER, text=event.text)
        return replace(state, transcript=state.transcript + (turn,), pending=True, last_error=None)

    if isinstance(event, ReplyReceived):
        turn = Turn(speaker=Speaker.ASSISTANT, text=event.text)
        return replace(state, transcript=state.transcript + (turn,), pending=False)

    if isinstance(event, RequestFailed):
        return replace(state, pending=False, last_error=event.error)

    if isinstance(event, SessionExited):
        return replace(
            state,
            status=SessionStatus.NOT_STARTED,
            transcript=(),
            pending=False,
            last_error=None
        )

    raise TypeError(f"Unknown session event: {type(event).__name__}")


def build_chat_request(state: SessionState, message: str) -> ChatRequest:
    """
    Payload for one turn. History is every turn after the locally
    synthesized greeting, including the message just submitted.
    """
    history = list(state.transcript[1:])

    return ChatRequest(
        history=history,
        message=message,
        context=state.context,
        mode=state.mode,
        details=state.details,
        repository_link=state.repository_link or None
    )
