"""Contact extraction: name, email, phone and profile links from raw resume text."""

import re

from models.schemas.analysis import ContactInfo
from services.exceptions import ensure_text

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Tried in order; the first pattern with any match wins
PHONE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b"),  # 555-123-4567 / 555.123.4567
    re.compile(r"(?<!\w)\(\d{3}\)\s*\d{3}[-.]?\d{4}\b"),  # (555) 123-4567
    re.compile(r"\b\d{10}\b"),  # 5551234567
)

LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)

# Domain-like URLs; a domain glued to "@" or to a longer token is not a candidate.
# Unlike a plain scan for domain-like tokens, email addresses never yield a
# portfolio: neither the domain of john@example.com nor a dotted local part
# like jane.doe.smith@ is reported.
PORTFOLIO_RE = re.compile(
    r"(?<![\w@.-])"
    r"(?:https?://)?(?:www\.)?(?:[a-z0-9-]+\.)+[a-z]{2,}"
    r"(?![\w@-]|\.\w)"
    r"(?:/[\w-]*)*/?",
    re.IGNORECASE,
)
_EXCLUDED_PORTFOLIO_HOSTS = ("linkedin", "github")

NAME_MAX_LENGTH = 50
_LOOSE_NAME_RE = re.compile(r"[A-Za-z\s.]+")

NAME_POLICIES = ("strict", "loose")


def _first_match(pattern: re.Pattern, text: str) -> str | None:
    match = pattern.search(text)
    return match.group() if match else None


def extract_email(text: str) -> str | None:
    return _first_match(EMAIL_RE, text)


def extract_phone(text: str) -> str | None:
    for pattern in PHONE_PATTERNS:
        phone = _first_match(pattern, text)
        if phone:
            return phone
    return None


def extract_portfolio(text: str) -> str | None:
    """Return the first website that is not a LinkedIn or GitHub link."""
    for match in PORTFOLIO_RE.finditer(text):
        url = match.group()
        lowered = url.lower()
        if any(host in lowered for host in _EXCLUDED_PORTFOLIO_HOSTS):
            continue
        return url if lowered.startswith("http") else f"https://{url}"
    return None


def _first_nonempty_line(text: str) -> str | None:
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped:
            return stripped
    return None


def is_plausible_name(line: str, policy: str = "strict") -> bool:
    """Judge whether a header line looks like a person's name.

    strict: under 50 chars, letters and whitespace only, 2 to 4 words.
    loose:  under 50 chars, ASCII letters, whitespace and periods only.
    """
    if policy not in NAME_POLICIES:
        raise ValueError(f"unknown name policy: {policy!r}")
    if len(line) >= NAME_MAX_LENGTH:
        return False
    if policy == "loose":
        return bool(_LOOSE_NAME_RE.fullmatch(line))
    if not all(ch.isalpha() or ch.isspace() for ch in line):
        return False
    return 2 <= len(line.split()) <= 4


def extract_name(text: str, policy: str = "strict") -> str | None:
    line = _first_nonempty_line(text)
    if line and is_plausible_name(line, policy):
        return line
    return None


def extract_contact_info(text: str, name_policy: str = "strict") -> ContactInfo:
    """Extract contact information from resume text.

    Every field falls back to None when nothing matches; only a non-string
    input is an error.
    """
    text = ensure_text(text)
    return ContactInfo(
        name=extract_name(text, name_policy),
        email=extract_email(text),
        phone=extract_phone(text),
        linkedin=_first_match(LINKEDIN_RE, text),
        github=_first_match(GITHUB_RE, text),
        portfolio=extract_portfolio(text),
    )
