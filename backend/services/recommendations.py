"""Map gaps found by the extractors to human-readable suggestions."""

from models.schemas.analysis import ContactInfo, SectionFlags
from services.skill_extractor import has_any_skill, has_skill_containing

MIN_SKILL_COUNT = 5
TARGET_OVERALL_SCORE = 70

PROJECT_SKILLS = frozenset({"javascript", "python", "react", "nodejs"})
CLOUD_SKILLS = frozenset({"aws", "azure", "google cloud"})

ADD_EMAIL = "Add your email address to the contact information section"
ADD_PHONE = "Include your phone number for better contactability"
ADD_LINKEDIN = "Add your LinkedIn profile URL to increase professional visibility"
ADD_GITHUB = "Consider adding your GitHub profile to showcase your coding projects"
ADD_SUMMARY = "Add a professional summary or objective at the beginning of your resume"
ADD_EXPERIENCE = "Include your work experience section with detailed responsibilities"
ADD_EDUCATION = "Add your education background and qualifications"
ADD_SKILLS_SECTION = "Create a dedicated skills section to highlight your technical abilities"
ADD_PROJECTS = "Consider adding a projects section to showcase your practical work"
EXPAND_SKILLS = "Expand your skills section to include more relevant technical skills"
ENHANCE_CONTENT = "Enhance your resume content to improve overall quality score"
ADD_CLOUD_CERTIFICATIONS = "Highlight any cloud certifications in a dedicated section"


def generate_recommendations(
    contact: ContactInfo,
    sections: SectionFlags,
    skills: list[str],
    overall_score: int,
) -> list[str]:
    """Run the checks in priority order: contact, structure, content, domain.

    Checks are independent; every one that holds adds its message.
    """
    recommendations: list[str] = []

    # Contact
    if not contact.email:
        recommendations.append(ADD_EMAIL)
    if not contact.phone:
        recommendations.append(ADD_PHONE)
    if not contact.linkedin:
        recommendations.append(ADD_LINKEDIN)
    if not contact.github and has_skill_containing(skills, "javascript", "python"):
        recommendations.append(ADD_GITHUB)

    # Structure
    if not sections.summary:
        recommendations.append(ADD_SUMMARY)
    if not sections.experience:
        recommendations.append(ADD_EXPERIENCE)
    if not sections.education:
        recommendations.append(ADD_EDUCATION)
    if not sections.skills:
        recommendations.append(ADD_SKILLS_SECTION)
    if not sections.projects and has_any_skill(skills, PROJECT_SKILLS):
        recommendations.append(ADD_PROJECTS)

    # Content
    if len(skills) < MIN_SKILL_COUNT:
        recommendations.append(EXPAND_SKILLS)
    if overall_score < TARGET_OVERALL_SCORE:
        recommendations.append(ENHANCE_CONTENT)

    # Domain-specific
    if not sections.certifications and has_any_skill(skills, CLOUD_SKILLS):
        recommendations.append(ADD_CLOUD_CERTIFICATIONS)

    return recommendations
