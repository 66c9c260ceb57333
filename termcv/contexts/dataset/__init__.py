"""
Dataset Context

Responsibilities:
- Loads the static CV record from YAML
- Renders each CV section as plain multi-line text
- Searches rendered work history

Owns: CV record, section formatting
Never: Writes to the terminal scrollback
"""

from termcv.contexts.dataset.cv_data_structure import (
    CVDataset,
    EducationEntry,
    ExperienceEntry,
    SkillRating,
    load_cv_dataset,
    load_localized_dataset,
)
from termcv.contexts.dataset.exceptions import InvalidCVDataError
from termcv.contexts.dataset.formatter import (
    render_basic,
    render_contact,
    render_education,
    render_experience,
    render_skills,
    search_experience,
)

__all__ = [
    # Data structures and loading
    "CVDataset",
    "EducationEntry",
    "ExperienceEntry",
    "SkillRating",
    "load_cv_dataset",
    "load_localized_dataset",
    "InvalidCVDataError",
    # Formatters
    "render_basic",
    "render_contact",
    "render_education",
    "render_experience",
    "render_skills",
    "search_experience",
]
