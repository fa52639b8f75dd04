from src.models.chat import ChatRequest, Mode
from src.prompts.project_defense import REPOSITORY_PLACEHOLDER
from src.prompts.system_instruction import (
    build_acknowledgement,
    build_greeting,
    build_system_instruction,
)


def test_job_instruction_names_position():
    request = ChatRequest(message="hi", mode="job", context="Junior React Developer")

    instruction = build_system_instruction(request)

    assert "interviewer" in instruction
    assert "Junior React Developer" in instruction


def test_project_instruction_embeds_link_and_details():
    request = ChatRequest(
        message="hi",
        mode="project",
        context="Inventory Manager",
        details="def main(): pass",
        repositoryLink="https://github.com/user/inventory",
    )

    instruction = build_system_instruction(request)

    assert "strict professor" in instruction
    assert "Inventory Manager" in instruction
    assert "https://github.com/user/inventory" in instruction
    assert '"def main(): pass"' in instruction
    assert REPOSITORY_PLACEHOLDER not in instruction


def test_project_instruction_without_link_uses_placeholder():
    request = ChatRequest(message="hi", mode="project", context="Inventory Manager")

    instruction = build_system_instruction(request)

    assert f"- Repository: {REPOSITORY_PLACEHOLDER}" in instruction


def test_blank_link_uses_placeholder():
    request = ChatRequest(message="hi", mode="project", context="X", githubUrl="   ")

    assert request.repository_link is None
    assert REPOSITORY_PLACEHOLDER in build_system_instruction(request)


def test_unknown_mode_falls_back_to_project():
    request = ChatRequest(message="hi", mode="thesis", context="X")

    assert request.mode == Mode.PROJECT
    assert "strict professor" in build_system_instruction(request)


def test_acknowledgement_mentions_mode():
    assert build_acknowledgement(Mode.JOB) == "Understood. job mode activated."
    assert build_acknowledgement(Mode.PROJECT) == "Understood. project mode activated."


def test_job_greeting_contains_title():
    assert "Data Engineer" in build_greeting(Mode.JOB, "Data Engineer")


def test_project_greeting_contains_name_and_link():
    greeting = build_greeting(Mode.PROJECT, "Inventory Manager", "https://gitlab.com/u/inv")

    assert '"Inventory Manager"' in greeting
    assert "https://gitlab.com/u/inv" in greeting


def test_project_greeting_without_link():
    greeting = build_greeting(Mode.PROJECT, "Inventory Manager")

    assert "Repo:" not in greeting


def test_each_mode_has_its_own_builder():
    from src.prompts.job_interview import get_job_interview_instruction
    from src.prompts.project_defense import get_project_defense_instruction
    from src.prompts.system_instruction import INSTRUCTION_BUILDERS

    assert set(INSTRUCTION_BUILDERS) == {Mode.JOB, Mode.PROJECT}

    job = ChatRequest(message="hi", mode="job", context="SRE")
    project = ChatRequest(message="hi", mode="project", context="Inventory", details="d")

    assert INSTRUCTION_BUILDERS[Mode.JOB](job) == get_job_interview_instruction("SRE")
    assert INSTRUCTION_BUILDERS[Mode.PROJECT](project) == get_project_defense_instruction("Inventory", "d", None)
