import logging
from typing import Protocol

from src.models.chat import ChatRequest
from src.session.state import (
    ReplyReceived,
    RequestFailed,
    SessionState,
    TurnSubmitted,
    build_chat_request,
    reduce,
)


class ChatTransport(Protocol):
    def send(self, request: ChatRequest) -> str: ...


def submit_turn(state: SessionState, text: str, client: ChatTransport) -> SessionState:
    """
    Submit one user message: append it, call the API, then append the reply
    or record the failure. The user's turn stays in the transcript on failure.
    """
    submitted = reduce(state, TurnSubmitted(text))
    if submitted is state:
        return state

    request = build_chat_request(submitted, text)

    try:
        reply = client.send(request)
    except Exception as e:
        logging.error(f"Turn failed: {e}")
        return reduce(submitted, RequestFailed(str(e)))

    return reduce(submitted, ReplyReceived(reply))
