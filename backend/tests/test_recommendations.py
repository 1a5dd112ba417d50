from models.schemas.analysis import ContactInfo, SectionFlags
from services.recommendations import (
    ADD_CLOUD_CERTIFICATIONS,
    ADD_EDUCATION,
    ADD_EMAIL,
    ADD_EXPERIENCE,
    ADD_GITHUB,
    ADD_LINKEDIN,
    ADD_PHONE,
    ADD_PROJECTS,
    ADD_SKILLS_SECTION,
    ADD_SUMMARY,
    ENHANCE_CONTENT,
    EXPAND_SKILLS,
    generate_recommendations,
)

COMPLETE_CONTACT = ContactInfo(
    name="Jane Doe",
    email="jane@doe.dev",
    phone="555-123-4567",
    linkedin="linkedin.com/in/janedoe",
    github="github.com/janedoe",
)
ALL_SECTIONS = SectionFlags(**{name: True for name in SectionFlags.model_fields})
FIVE_SKILLS = ["Docker", "Git", "Jira", "Linux", "Sql"]


def test_empty_resume_gets_every_base_message_in_order():
    recs = generate_recommendations(ContactInfo(), SectionFlags(), [], 0)
    assert recs == [
        ADD_EMAIL,
        ADD_PHONE,
        ADD_LINKEDIN,
        ADD_SUMMARY,
        ADD_EXPERIENCE,
        ADD_EDUCATION,
        ADD_SKILLS_SECTION,
        EXPAND_SKILLS,
        ENHANCE_CONTENT,
    ]


def test_complete_resume_gets_no_recommendations():
    skills = FIVE_SKILLS + ["Python", "Aws"]
    assert generate_recommendations(COMPLETE_CONTACT, ALL_SECTIONS, skills, 100) == []


def test_github_suggested_only_for_coding_skills():
    contact = COMPLETE_CONTACT.model_copy(update={"github": None})
    assert ADD_GITHUB in generate_recommendations(contact, ALL_SECTIONS, ["Javascript"], 100)
    assert ADD_GITHUB in generate_recommendations(contact, ALL_SECTIONS, ["Python"], 100)
    assert ADD_GITHUB not in generate_recommendations(contact, ALL_SECTIONS, FIVE_SKILLS, 100)


def test_projects_suggested_for_developer_skills():
    sections = ALL_SECTIONS.model_copy(update={"projects": False})
    assert ADD_PROJECTS in generate_recommendations(COMPLETE_CONTACT, sections, ["Nodejs"], 100)
    assert ADD_PROJECTS not in generate_recommendations(COMPLETE_CONTACT, sections, ["Java"], 100)


def test_cloud_certifications_suggested_for_cloud_skills():
    sections = ALL_SECTIONS.model_copy(update={"certifications": False})
    recs = generate_recommendations(COMPLETE_CONTACT, sections, ["Google cloud"], 100)
    assert recs[-1] == ADD_CLOUD_CERTIFICATIONS
    assert ADD_CLOUD_CERTIFICATIONS not in generate_recommendations(
        COMPLETE_CONTACT, sections, ["Gcp"], 100
    )


def test_score_threshold():
    assert ENHANCE_CONTENT in generate_recommendations(COMPLETE_CONTACT, ALL_SECTIONS, FIVE_SKILLS, 69)
    assert ENHANCE_CONTENT not in generate_recommendations(COMPLETE_CONTACT, ALL_SECTIONS, FIVE_SKILLS, 70)


def test_skill_count_threshold():
    assert EXPAND_SKILLS in generate_recommendations(COMPLETE_CONTACT, ALL_SECTIONS, FIVE_SKILLS[:4], 100)
    assert EXPAND_SKILLS not in generate_recommendations(COMPLETE_CONTACT, ALL_SECTIONS, FIVE_SKILLS, 100)


def test_checks_are_independent():
    recs = generate_recommendations(
        ContactInfo(), SectionFlags(), ["Python", "React", "Aws"], 10
    )
    assert recs == [
        ADD_EMAIL,
        ADD_PHONE,
        ADD_LINKEDIN,
        ADD_GITHUB,
        ADD_SUMMARY,
        ADD_EXPERIENCE,
        ADD_EDUCATION,
        ADD_SKILLS_SECTION,
        ADD_PROJECTS,
        EXPAND_SKILLS,
        ENHANCE_CONTENT,
        ADD_CLOUD_CERTIFICATIONS,
    ]
