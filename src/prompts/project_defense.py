from typing import Optional

REPOSITORY_PLACEHOLDER = "Not provided"


def get_project_defense_instruction(
    context: str,
    details: str = "",
    repository_link: Optional[str] = None
) -> str:
    """
    Generate the strict evaluator instruction for a final project defense.
    The repository link and details are interpolated verbatim.
    """
    repository = repository_link or REPOSITORY_PLACEHOLDER

    return f"""Act as a strict professor evaluating the Final Project: "{context}".

PROJECT INFORMATION:
- Repository: {repository}
- Technical Details / Code: "{details}"

Your objectives:
1. If the student provided code in the details, ANALYZE IT! Look for bad practices.
2. If there is a repository URL, ask about the repository structure (assume you have seen it).
3. Question the architecture.
4. Be rigorous."""


def get_project_defense_greeting(context: str, repository_link: Optional[str] = None) -> str:
    """Opening line shown locally when a project defense starts"""
    repo = f" (Repo: {repository_link})" if repository_link else ""
    return f'Hello. This is the review panel. I see you are presenting the project "{context}"{repo}. Begin your defense.'
