"""
CV Data Structures

Defines the immutable record behind the terminal CV: about text, basic info,
skill ratings, work history, education, contact links, help text and banner.
The record is loaded once from YAML and shared read-only by every formatter.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf

from termcv.contexts.dataset.exceptions import InvalidCVDataError

load_dotenv()
DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "cv.yaml"
CV_DATA_PATH = Path(os.getenv("TERMCV_DATA_PATH", str(DEFAULT_DATA_PATH)))

REQUIRED_FIELDS = (
    "about",
    "basic",
    "skills",
    "experience",
    "education",
    "contact",
    "help",
    "ascii",
)


@dataclass(frozen=True)
class SkillRating:
    """
    One rated skill.

    Attributes:
        name: Skill name (e.g., "PL/SQL")
        value: Rating in the closed range 0-100
    """

    name: str
    value: int


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One work history entry.

    Attributes:
        period: Human-readable date range (e.g., "Aug 2023 - Present")
        company: Employer name
        role: Job title
        bullets: Ordered responsibilities
    """

    period: str
    company: str
    role: str
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EducationEntry:
    """
    One education entry.

    Attributes:
        period: Study period (e.g., "2011 - 2013")
        title: Short degree label (e.g., "Master's Degree")
        degree: Full degree name
        school: Institution name
        desc: One-paragraph description
    """

    period: str
    title: str
    degree: str
    school: str
    desc: str


@dataclass(frozen=True)
class ContactLinks:
    email: str
    linkedin: str
    github: str


@dataclass(frozen=True)
class CVDataset:
    """
    Complete CV record.

    Attributes:
        name: Owner's full name
        about: Multi-line About text
        basic: Ordered (label, value) pairs
        skills: Ordered skill ratings
        experience: Work history, most recent first
        education: Education history, most recent first
        contact: Email and profile URLs
        help: Static help text block
        ascii: ASCII banner (multi-line)
    """

    name: str
    about: str
    basic: Tuple[Tuple[str, str], ...]
    skills: Tuple[SkillRating, ...]
    experience: Tuple[ExperienceEntry, ...]
    education: Tuple[EducationEntry, ...]
    contact: ContactLinks
    help: str
    ascii: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_path: Path = None) -> "CVDataset":
        """
        Build a dataset from a plain dict (as produced by OmegaConf.to_container).

        Args:
            data: Parsed YAML content
            source_path: Origin file, used in error messages

        Returns:
            Validated CVDataset

        Raises:
            InvalidCVDataError: If a required field is missing or a value is malformed
        """
        missing = [key for key in REQUIRED_FIELDS if key not in data]
        if missing:
            raise InvalidCVDataError(
                f"CV dataset is missing required fields: {', '.join(missing)}",
                source_path=source_path,
            )

        try:
            basic = tuple((str(label), str(value)) for label, value in data["basic"])
            skills = tuple(
                _parse_skill(entry, index, source_path)
                for index, entry in enumerate(data["skills"])
            )
            experience = tuple(
                ExperienceEntry(
                    period=str(entry["period"]),
                    company=str(entry["company"]),
                    role=str(entry["role"]),
                    bullets=tuple(str(bullet) for bullet in entry.get("bullets") or []),
                )
                for entry in data["experience"]
            )
            education = tuple(
                EducationEntry(
                    period=str(entry["period"]),
                    title=str(entry.get("title", "")),
                    degree=str(entry["degree"]),
                    school=str(entry["school"]),
                    desc=str(entry.get("desc", "")),
                )
                for entry in data["education"]
            )
            contact = ContactLinks(
                email=str(data["contact"]["email"]),
                linkedin=str(data["contact"]["linkedin"]),
                github=str(data["contact"]["github"]),
            )
        except InvalidCVDataError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidCVDataError(
                f"Malformed CV dataset entry: {e}", source_path=source_path
            ) from e

        ascii_banner = data["ascii"]
        if isinstance(ascii_banner, list):
            ascii_banner = "\n".join(str(line) for line in ascii_banner)

        return cls(
            name=str(data.get("name", "")),
            about=str(data["about"]),
            basic=basic,
            skills=skills,
            experience=experience,
            education=education,
            contact=contact,
            help=str(data["help"]),
            ascii=str(ascii_banner),
        )


def _parse_skill(entry: List[Any], index: int, source_path: Path = None) -> SkillRating:
    """Parse a [name, value] pair and enforce the 0-100 range."""
    name, value = entry
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not float(value).is_integer():
        raise InvalidCVDataError(
            f"Skill rating for '{name}' must be a whole number, got {value!r}",
            field_path=f"skills[{index}]",
            source_path=source_path,
        )
    rating = int(value)
    if not 0 <= rating <= 100:
        raise InvalidCVDataError(
            f"Skill rating for '{name}' must be between 0 and 100, got {rating}",
            field_path=f"skills[{index}]",
            source_path=source_path,
        )
    return SkillRating(name=str(name), value=rating)


def load_cv_dataset(data_path: Path = None) -> CVDataset:
    """
    Load the CV dataset from YAML.

    Args:
        data_path: YAML file (defaults to TERMCV_DATA_PATH or the bundled cv.yaml)

    Returns:
        Immutable CVDataset

    Raises:
        InvalidCVDataError: If the file is missing or its content is invalid
    """
    if data_path is None:
        data_path = CV_DATA_PATH

    if not data_path.exists():
        raise InvalidCVDataError("CV dataset file not found", source_path=data_path)

    try:
        data = OmegaConf.to_container(OmegaConf.load(data_path), resolve=True)
    except yaml.YAMLError as e:
        raise InvalidCVDataError(f"CV dataset is not valid YAML: {e}", source_path=data_path) from e
    if not isinstance(data, dict):
        raise InvalidCVDataError("CV dataset must be a mapping", source_path=data_path)

    return CVDataset.from_dict(data, source_path=data_path)


def load_localized_dataset(language: str, data_dir: Path = None) -> CVDataset:
    """
    Load the dataset for a language, falling back to the default file.

    Looks for cv.{language}.yaml next to the default dataset and uses cv.yaml
    when no translation exists.
    """
    if data_dir is None:
        data_dir = CV_DATA_PATH.parent

    localized = data_dir / f"{CV_DATA_PATH.stem}.{language}.yaml"
    if localized.exists():
        return load_cv_dataset(localized)
    return load_cv_dataset(data_dir / CV_DATA_PATH.name)
