"""
Plain-text Section Formatters

Pure functions that render each CV section as multi-line plain text for the
terminal. None of them mutate the dataset.
"""

from typing import List

from termcv.contexts.dataset.cv_data_structure import CVDataset, SkillRating

SKILL_NAME_WIDTH = 16
BASIC_LABEL_WIDTH = 12
BAR_WIDTH = 20
BAR_FILL = "#"
BAR_PAD = "."


def skill_bar(value: int) -> str:
    """Proportional bar for a 0-100 rating: round(value / 5) fills, padded to 20."""
    return (BAR_FILL * round(value / 5)).ljust(BAR_WIDTH, BAR_PAD)


def format_skill(skill: SkillRating) -> str:
    """Format one skill as `name  value% bar`."""
    return f"{skill.name.ljust(SKILL_NAME_WIDTH)} {str(skill.value).rjust(3)}% {skill_bar(skill.value)}"


def render_skills(dataset: CVDataset) -> str:
    return "\n".join(format_skill(skill) for skill in dataset.skills)


def render_basic(dataset: CVDataset) -> str:
    return "\n".join(f"{label.ljust(BASIC_LABEL_WIDTH)}: {value}" for label, value in dataset.basic)


def render_experience(dataset: CVDataset) -> str:
    """
    Render work history.

    Each entry becomes:
        [period] company
          Role: role
          - bullet
          - bullet

    Entries are separated by a blank line, which search relies on to split blocks.
    """
    blocks = []
    for entry in dataset.experience:
        lines = [f"[{entry.period}] {entry.company}", f"  Role: {entry.role}"]
        lines.append("  - " + "\n  - ".join(entry.bullets))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_education(dataset: CVDataset) -> str:
    return "\n\n".join(
        f"[{entry.period}] {entry.degree} @ {entry.school}\n  {entry.desc}"
        for entry in dataset.education
    )


def render_contact(dataset: CVDataset) -> List[str]:
    """Contact details as individual lines."""
    return [
        f"Email: {dataset.contact.email}",
        f"LinkedIn: {dataset.contact.linkedin}",
        f"GitHub: {dataset.contact.github}",
    ]


def search_experience(dataset: CVDataset, keyword: str) -> str:
    """
    Filter rendered experience blocks by a case-insensitive substring.

    Args:
        dataset: CV dataset
        keyword: Phrase to look for (matched verbatim, no tokenization)

    Returns:
        Matching blocks joined by a blank line, or "No matches for '<keyword>'."
    """
    blocks = render_experience(dataset).split("\n\n")
    needle = keyword.lower()
    results = [block for block in blocks if needle in block.lower()]
    if not results:
        return f"No matches for '{keyword}'."
    return "\n\n".join(results)
