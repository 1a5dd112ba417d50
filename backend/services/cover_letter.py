import logging

from services import ollama_client, prompt_builder

logger = logging.getLogger(__name__)


async def generate_cover_letter(
    resume_text: str,
    job_description: str,
    company_name: str | None = None,
    role_title: str | None = None,
) -> str:
    """Generate a plain-text cover letter. Raises LLMServiceError on failure."""
    prompt = prompt_builder.build_cover_letter_prompt(
        resume_text, job_description, company_name, role_title
    )
    letter = await ollama_client.chat(prompt, prompt_builder.COVER_LETTER_SYSTEM_PROMPT)
    logger.info("Generated cover letter (%d chars)", len(letter))
    return letter
