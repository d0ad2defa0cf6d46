"""CV content models.

The CV is a plain nested record handed unmodified to the presentation layer.
All models are frozen: content only changes by editing the source data.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Content(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class IconDetail(_Content):
    """Icon reference with optional CSS classes."""

    name: str
    class_name: str | None = "h-4 w-4"


def create_icon(name: str, class_name: str = "h-4 w-4") -> IconDetail:
    """Create an IconDetail for consistent icon usage across components.

    Args:
        name: Icon name (e.g. "mail", "github").
        class_name: CSS classes applied to the icon.

    Returns:
        An IconDetail object.
    """
    return IconDetail(name=name, class_name=class_name)


class ContactLink(_Content):
    """Contact link in the header (email, phone, social media)."""

    href: str
    text: str
    icon: IconDetail
    aria_label: str
    # False hides the text on the web (icon only); print layouts always show it
    show_text: bool = False


class HeaderData(_Content):
    """CV header section."""

    name: str
    title: str
    profile_image: str
    contacts: list[ContactLink] = Field(default_factory=list)


class ProfileData(_Content):
    """Professional profile/summary section."""

    summary: str


class Skill(_Content):
    name: str


class SkillCategory(_Content):
    """A category of skills (e.g. "Programming Languages")."""

    title: str
    skills: list[Skill] = Field(default_factory=list)


class SkillsData(_Content):
    categories: list[SkillCategory] = Field(default_factory=list)


class ProjectFeature(_Content):
    text: str


class SubProject(_Content):
    """A component within a larger project."""

    name: str
    github_url: str | None = None
    description: str
    features: list[ProjectFeature] = Field(default_factory=list)


class ProjectEntry(_Content):
    """Single entry in the projects section."""

    title: str
    github_url: str | None = None
    website_url: str | None = None
    description: str
    features: list[ProjectFeature] = Field(default_factory=list)
    sub_projects: list[SubProject] = Field(default_factory=list)


class ProjectsData(_Content):
    projects: list[ProjectEntry] = Field(default_factory=list)


class EducationEntry(_Content):
    institution: str
    degree: str
    period: str


class EducationData(_Content):
    entries: list[EducationEntry] = Field(default_factory=list)


class LanguageEntry(_Content):
    """Language with proficiency level and a 0-100 progress value."""

    language: str
    level: str
    proficiency_percent: int = Field(ge=0, le=100)


class LanguagesData(_Content):
    entries: list[LanguageEntry] = Field(default_factory=list)


class FooterData(_Content):
    references_text: str
    copyright_name: str


class CVData(_Content):
    """The overall structure for all CV data."""

    site_title: str
    header: HeaderData
    profile: ProfileData
    skills: SkillsData
    projects: ProjectsData
    education: EducationData
    languages: LanguagesData
    footer: FooterData
