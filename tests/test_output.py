"""Tests for markdown output formatting."""

import tempfile
from pathlib import Path

from cv_site.models.cv import (
    ContactLink,
    CVData,
    EducationData,
    FooterData,
    HeaderData,
    LanguagesData,
    ProfileData,
    ProjectsData,
    SkillsData,
    create_icon,
)
from cv_site.output.markdown import format_contact, format_cv, save_markdown


def _minimal_cv() -> CVData:
    return CVData(
        site_title="Minimal",
        header=HeaderData(name="Jane Doe", title="Engineer", profile_image="images/me.jpg"),
        profile=ProfileData(summary="Builds things."),
        skills=SkillsData(),
        projects=ProjectsData(),
        education=EducationData(),
        languages=LanguagesData(),
        footer=FooterData(references_text="References on request", copyright_name="Jane Doe"),
    )


class TestSaveMarkdown:
    """Tests for save_markdown function."""

    def test_saves_content_to_file(self) -> None:
        """Test that content is saved correctly."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "test.md"
            content = "# Test\n\nThis is a test."

            result = save_markdown(content, output_path)

            assert result == output_path
            assert output_path.read_text(encoding="utf-8") == content

    def test_creates_parent_directories(self) -> None:
        """Test that parent directories are created if needed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "nested" / "path" / "test.md"

            save_markdown("# Test", output_path)

            assert output_path.exists()

    def test_accepts_string_path(self) -> None:
        """Test that string paths are accepted."""
        with tempfile.TemporaryDirectory() as tmpdir:
            result = save_markdown("# Test", f"{tmpdir}/test.md")
            assert isinstance(result, Path)
            assert result.exists()


class TestFormatContact:
    """Tests for format_contact function."""

    def test_text_always_shown(self) -> None:
        """Icon-only contacts still print their text."""
        contact = ContactLink(
            href="https://github.com/me",
            text="GitHub",
            icon=create_icon("github"),
            aria_label="GitHub Profile",
            show_text=False,
        )
        assert format_contact(contact) == "[GitHub](https://github.com/me)"


class TestFormatCV:
    """Tests for format_cv function."""

    def test_header(self, sample_cv_data: CVData) -> None:
        result = format_cv(sample_cv_data)
        assert result.startswith("# YOUR FULL NAME\n**Your Professional Title | Your Specialty**")
        assert "[your.email@example.com](mailto:your.email@example.com)" in result
        assert "[LinkedIn](https://www.linkedin.com/in/yourprofile/)" in result

    def test_sections_in_page_order(self, sample_cv_data: CVData) -> None:
        result = format_cv(sample_cv_data)
        headings = [
            "## Professional Profile",
            "## Technical Skills",
            "## Featured Projects",
            "## Education",
            "## Languages",
        ]
        positions = [result.index(heading) for heading in headings]
        assert positions == sorted(positions)

    def test_skills(self, sample_cv_data: CVData) -> None:
        result = format_cv(sample_cv_data)
        assert "- **Architecture & Design:** Microservices, RESTful APIs" in result

    def test_projects(self, sample_cv_data: CVData) -> None:
        result = format_cv(sample_cv_data)
        assert "### Example Project 1: Dynamic Data Platform" in result
        assert (
            "[GitHub](https://github.com/yourusername/example-project-1) | "
            "[Website](https://example-project-1-live.com)"
        ) in result
        assert "#### Sub-project Alpha" in result
        assert "- Optimized performance of module XYZ by P%." in result

    def test_education_and_languages(self, sample_cv_data: CVData) -> None:
        result = format_cv(sample_cv_data)
        assert (
            "- **Your Degree | Major** - University Name, City "
            "(Start Year - End Year (or Present))"
        ) in result
        assert "- **Your Native Language:** Native" in result

    def test_footer(self, sample_cv_data: CVData) -> None:
        result = format_cv(sample_cv_data)
        assert result.endswith("---\n*References available upon request*\n\n© Your Full Name\n")

    def test_empty_sections_omitted(self) -> None:
        result = format_cv(_minimal_cv())
        assert "## Professional Profile\nBuilds things." in result
        assert "## Technical Skills" not in result
        assert "## Featured Projects" not in result
        assert "## Education" not in result
        assert "## Languages" not in result
        assert "© Jane Doe" in result
