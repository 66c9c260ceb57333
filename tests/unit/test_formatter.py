"""Unit tests for plain-text section formatters."""

import pytest

from termcv.contexts.dataset.cv_data_structure import SkillRating
from termcv.contexts.dataset.formatter import (
    format_skill,
    render_basic,
    render_contact,
    render_education,
    render_experience,
    render_skills,
    search_experience,
    skill_bar,
)


@pytest.mark.unit
def test_skill_bar_rating_80():
    """80 -> round(80/5) = 16 fill characters padded to 20."""
    bar = skill_bar(80)

    assert bar == "#" * 16 + "...."
    assert len(bar) == 20


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, filled",
    [(0, 0), (30, 6), (75, 15), (100, 20)],
)
def test_skill_bar_lengths(value, filled):
    bar = skill_bar(value)

    assert bar.count("#") == filled
    assert len(bar) == 20


@pytest.mark.unit
def test_format_skill_columns():
    """Name padded to 16, value right-aligned to 3, then percent and bar."""
    line = format_skill(SkillRating(name="PL/SQL", value=80))

    assert line == "PL/SQL".ljust(16) + "  80% " + "#" * 16 + "...."


@pytest.mark.unit
def test_render_skills_one_line_per_skill(dataset):
    lines = render_skills(dataset).split("\n")

    assert len(lines) == len(dataset.skills)
    assert lines[-1].startswith("Python")
    assert lines[-1].endswith("######" + "." * 14)


@pytest.mark.unit
def test_render_basic(dataset):
    lines = render_basic(dataset).split("\n")

    assert lines[0] == "Age         : 36"
    assert lines[1] == "Email       : contact@claudiu-morogan.dev"


@pytest.mark.unit
def test_render_experience_layout(dataset):
    """Entries render as header, role, bullets, separated by blank lines."""
    blocks = render_experience(dataset).split("\n\n")

    assert len(blocks) == len(dataset.experience)
    first = blocks[0].split("\n")
    assert first[0] == "[Aug 2023 - Present] Global Business Associates"
    assert first[1] == "  Role: PHP & PL/SQL Developer"
    assert first[2] == "  - PL/SQL development per requirements"
    assert len(first) == 2 + len(dataset.experience[0].bullets)


@pytest.mark.unit
def test_render_education_layout(dataset):
    blocks = render_education(dataset).split("\n\n")

    assert blocks[0].split("\n")[0] == (
        "[2011 - 2013] Master of Information Technology @ "
        "Romananian-American University of Bucharest"
    )
    assert blocks[0].split("\n")[1].startswith("  Advanced programming focus")


@pytest.mark.unit
def test_render_contact(dataset):
    assert render_contact(dataset) == [
        "Email: contact@claudiu-morogan.dev",
        "LinkedIn: https://www.linkedin.com/in/morogan-claudiu/",
        "GitHub: https://github.com/claudiu-morogan",
    ]


class TestSearchExperience:
    """Test case-insensitive substring search over rendered experience blocks."""

    @pytest.mark.unit
    def test_plsql_matches_only_plsql_entries(self, dataset):
        result = search_experience(dataset, "PL/SQL")
        blocks = result.split("\n\n")

        companies = [block.split("\n")[0] for block in blocks]
        assert companies == [
            "[Aug 2023 - Present] Global Business Associates",
            "[Mar 2020 - Nov 2022] Oracle",
            "[Oct 2017 - Mar 2020] Orange Romania",
            "[Nov 2016 - Mar 2020] Orange Services Romania",
        ]
        assert all("pl/sql" in block.lower() for block in blocks)

    @pytest.mark.unit
    def test_case_insensitive(self, dataset):
        assert search_experience(dataset, "pl/sql") == search_experience(dataset, "PL/SQL")

    @pytest.mark.unit
    def test_phrase_matches_across_words(self, dataset):
        """A multi-word phrase is a plain substring test."""
        result = search_experience(dataset, "docker environment")

        assert result.startswith("[Nov 2022 - Jul 2023] Wolters Kluwer")
        assert "\n\n" not in result

    @pytest.mark.unit
    def test_no_matches_message(self, dataset):
        assert search_experience(dataset, "zzzznotfound") == "No matches for 'zzzznotfound'."
