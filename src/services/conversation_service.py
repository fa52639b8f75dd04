import logging
from typing import List, Optional, Sequence

from src.models.chat import ChatRequest, ProviderTurn, Speaker, Turn
from src.prompts.system_instruction import build_acknowledgement, build_system_instruction

ROLE_MAP = {
    Speaker.USER: "user",
    Speaker.ASSISTANT: "model",
}


def _provider_turn(role: str, text: str) -> ProviderTurn:
    return {"role": role, "parts": [{"text": text}]}


def to_provider_turns(history: Sequence[Turn]) -> List[ProviderTurn]:
    """
    Map transcript turns to the provider's user/model vocabulary, preserving order
    """
    return [_provider_turn(ROLE_MAP[turn.speaker], turn.text) for turn in history]


def build_provider_history(
    request: ChatRequest,
    max_history_turns: Optional[int] = None
) -> List[ProviderTurn]:
    """
    Priming exchange (instruction as a user turn, fixed acknowledgement as a
    model turn) followed by the replayed transcript. The new message is not
    part of this list; it is sent separately.
    """
    history = list(request.history)

    if max_history_turns is not None and max_history_turns > 0 and len(history) > max_history_turns:
        dropped = len(history) - max_history_turns
        history = history[-max_history_turns:]
        logging.warning(f"History truncated: dropped {dropped} oldest turns")

    priming = [
        _provider_turn("user", build_system_instruction(request)),
        _provider_turn("model", build_acknowledgement(request.mode)),
    ]

    return priming + to_provider_turns(history)
