"""Prompt templates for LLM calls."""

COVER_LETTER_SYSTEM_PROMPT = """You are an expert cover-letter writer trained to create concise, persuasive business letters.
Your output must ALWAYS be plain text with professional formatting.

RULES:
- Never output JSON or code blocks.
- Never include analysis, meta-commentary, or explanations.
- Always produce a clean, single, well-formatted business letter.
- Extract the candidate's REAL name from the resume. Never invent names.
- If no name is present, use "[Your Name]".
- Max length: 250-270 words.
- Never repeat the job description or restate the resume verbatim.

Only output the final letter."""


def build_cover_letter_prompt(
    resume_text: str,
    job_description: str,
    company_name: str | None = None,
    role_title: str | None = None,
) -> str:
    """User prompt for a tailored cover letter."""
    return f"""Write a concise, high-impact professional cover letter.

OUTPUT RULES:
- Max 250 words.
- Plain text only (no JSON, no symbols, no headings, no bullets).
- Start with a greeting such as "Dear Hiring Team,".
- End with a professional sign-off and the candidate's real name.
- Use first-person voice.

CONTENT RULES:
- Highlight 2-3 quantifiable achievements from the resume.
- Show clear alignment with the job description.
- Do NOT fabricate experience or unrealistic accomplishments.
- Tailor the letter tone to the seniority of the role.

CONTEXT:
Company: {company_name or "Unknown"}
Role: {role_title or "Unknown"}

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

Write the final cover letter now."""
