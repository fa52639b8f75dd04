JOB_INTERVIEW_INSTRUCTION = """Act as an interviewer for the position: "{context}". Evaluate the candidate."""


def get_job_interview_instruction(context: str) -> str:
    """
    Generate the recruiter persona instruction
    """
    return JOB_INTERVIEW_INSTRUCTION.format(context=context)


def get_job_interview_greeting(context: str) -> str:
    """Opening line shown locally when a job interview starts"""
    return f"Hello. I'm the recruiter for the {context} position. Tell me about yourself."
