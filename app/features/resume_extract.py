from __future__ import annotations

import re

SKILL_KEYWORDS: tuple[str, ...] = (
    "javascript", "java", "python", "c++", "c", "c#", "typescript",
    "react", "redux", "angular", "vue", "node", "express",
    "mongodb", "mysql", "postgresql", "sqlite",
    "aws", "azure", "gcp", "cloud",
    "docker", "kubernetes", "git", "github", "jira",
    "tensorflow", "pytorch", "machine learning", "deep learning",
    "html", "css", "bootstrap", "tailwind",
    "django", "flask", "fastapi",
    "firebase", "graphql",
    "linux", "bash",
)

# Section headers, month names, places and resume verbs that look like skills
# once capitalized.
SKILL_STOPWORDS: frozenset[str] = frozenset({
    "achieved", "achievements", "solved", "engineered", "designed",
    "bacheloroftechnologyincomputerscience",
    "jan", "feb", "mar", "apr", "may", "jun", "july", "aug", "sep", "oct", "nov", "dec",
    "bhopal", "madhyapradesh", "datia", "india", "link", "technicalskills", "project",
    "experience", "education",
})

MAX_SKILL_TOKEN_LENGTH = 12

_WS_DASH_RE = re.compile(r"[\s-]+")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")
_WS_RE = re.compile(r"\s+")

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PHONE_RE = re.compile(r"(?:\+91[\s-]?)?[6-9]\d{9}")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_NAME_WORD_RE = re.compile(r"[A-Z][a-z]+")

_TOKEN_SPLIT_RE = re.compile(r"[\s,()]+")
_CAPITALIZED_RE = re.compile(r"[A-Z][a-zA-Z0-9.+-]*")
_SKILL_CHARS_RE = re.compile(r"[a-zA-Z.+-]+")


def normalize_text(text: str) -> str:
    cleaned = _WS_DASH_RE.sub(" ", text or "")
    cleaned = _NON_ASCII_RE.sub("", cleaned)
    cleaned = _BLANK_LINES_RE.sub("\n", cleaned)
    cleaned = _WS_RE.sub(" ", cleaned)
    return cleaned.strip()


def extract_email(text: str) -> str | None:
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else None


def extract_phone(text: str) -> str | None:
    match = _PHONE_RE.search(text)
    return match.group(0) if match else None


def extract_name(text: str) -> str | None:
    """First two capitalized words of the first line, e.g. "NikhilSihare" -> "Nikhil Sihare".

    Only a heuristic: headers that start with a title, a single-word name or
    an all-caps name come back as None or as the wrong words.
    """
    first_line = (text or "").split("\n")[0]
    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", first_line)
    words = _NAME_WORD_RE.findall(spaced)
    if len(words) >= 2:
        return " ".join(words[:2])
    return None


def extract_capitalized_words(text: str) -> list[str]:
    return [word for word in _TOKEN_SPLIT_RE.split(text) if _CAPITALIZED_RE.fullmatch(word)]


def finalize_skills(skills: list[str]) -> list[str]:
    return sorted(set(skills))


def extract_skills(text: str) -> list[str]:
    lowered = text.lower()
    keyword_matches = [skill for skill in SKILL_KEYWORDS if skill in lowered]
    candidates = keyword_matches + extract_capitalized_words(text)

    # Order matters: the ".js" suffix is stripped only after the length and
    # stop-word filters, so "Handlebars.js" is dropped even though
    # "handlebars" alone would fit.
    candidates = [word for word in candidates if len(word) <= MAX_SKILL_TOKEN_LENGTH]
    candidates = [word for word in candidates if _SKILL_CHARS_RE.fullmatch(word)]
    candidates = [word for word in candidates if word.lower() not in SKILL_STOPWORDS]

    skills: list[str] = []
    for word in candidates:
        skill = word.lower()
        if skill.endswith(".js"):
            skill = skill[: -len(".js")]
        skills.append(skill)
    return finalize_skills(skills)


def extract_jd_keywords(jd_text: str) -> list[str]:
    lowered = (jd_text or "").lower()
    return [skill for skill in SKILL_KEYWORDS if skill in lowered]
