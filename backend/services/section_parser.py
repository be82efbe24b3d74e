"""Document section segmentation by heading lines."""

import re

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|path)",
        r"(?:positions?\s*held|roles)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

# Sections an ATS expects; each missing one costs points in the section score
EXPECTED_SECTIONS: tuple[str, ...] = ("experience", "education", "skills")

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE
    )

# Keywords that name a section inside a compound heading
# ("Work Experience & Internships", "Education and Certifications")
SECTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "experience": ("experience", "employment", "work history"),
    "education": ("education", "academic"),
    "skills": ("skills", "competencies", "technologies", "expertise"),
    "summary": ("summary", "objective", "profile"),
    "projects": ("projects", "portfolio"),
    "certifications": ("certification", "certificate", "license", "licence"),
    "achievements": ("achievement", "award", "honor", "accomplishment"),
}

MAX_HEADING_WORDS = 6
_CONNECTORS = frozenset({"and", "&", "/", "+", "of", "the", "-", "|"})
_SENTENCE_PUNCT_RE = re.compile(r"[.,;!?()\d]")


def match_heading(line: str) -> str | None:
    """Canonical section name if ``line`` is exactly a known heading, else None."""
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _COMPILED.items():
        if pattern.match(stripped):
            return section_name
    return None


def is_heading_like(line: str) -> bool:
    """Short title-cased line without sentence punctuation, digits or bullets."""
    stripped = line.strip().rstrip(":").strip()
    if not stripped or _SENTENCE_PUNCT_RE.search(stripped):
        return False
    words = stripped.split()
    if len(words) > MAX_HEADING_WORDS:
        return False
    return all(w.lower() in _CONNECTORS or w[0].isupper() for w in words)


def heading_sections(line: str) -> list[str]:
    """Every section a heading line names; [] for body text."""
    exact = match_heading(line)
    if exact:
        return [exact]
    if not is_heading_like(line):
        return []
    lower = line.lower()
    return [
        name for name, keywords in SECTION_KEYWORDS.items()
        if any(k in lower for k in keywords)
    ]


def detect_sections(text: str) -> list[str]:
    """Canonical names of the headings present, in document order."""
    found: list[str] = []
    for line in text.split("\n"):
        for name in heading_sections(line):
            if name not in found:
                found.append(name)
    return found
