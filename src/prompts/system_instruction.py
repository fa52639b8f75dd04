import logging
from typing import Callable, Dict, Optional

from src.models.chat import ChatRequest, Mode
from src.prompts.job_interview import get_job_interview_instruction, get_job_interview_greeting
from src.prompts.project_defense import get_project_defense_instruction, get_project_defense_greeting


def _job_instruction(request: ChatRequest) -> str:
    return get_job_interview_instruction(request.context)


def _project_instruction(request: ChatRequest) -> str:
    return get_project_defense_instruction(
        context=request.context,
        details=request.details,
        repository_link=request.repository_link
    )


INSTRUCTION_BUILDERS: Dict[Mode, Callable[[ChatRequest], str]] = {
    Mode.JOB: _job_instruction,
    Mode.PROJECT: _project_instruction,
}


def build_system_instruction(request: ChatRequest) -> str:
    """
    Select the persona instruction for the request's mode
    """
    builder = INSTRUCTION_BUILDERS.get(request.mode, _project_instruction)
    instruction = builder(request)
    logging.info(f"Built {request.mode.value} instruction ({len(instruction)} chars)")
    return instruction


def build_acknowledgement(mode: Mode) -> str:
    """Fixed model reply that closes the priming exchange"""
    return f"Understood. {mode.value} mode activated."


def build_greeting(mode: Mode, context: str, repository_link: Optional[str] = None) -> str:
    if mode == Mode.JOB:
        return get_job_interview_greeting(context)
    return get_project_defense_greeting(context, repository_link)
