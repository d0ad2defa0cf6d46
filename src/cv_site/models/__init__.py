"""Data models for CV Site."""

from cv_site.models.cv import (
    ContactLink,
    CVData,
    EducationEntry,
    IconDetail,
    LanguageEntry,
    ProjectEntry,
    SkillCategory,
    SubProject,
    create_icon,
)
from cv_site.models.generator import (
    PROFILE_OPTIONS,
    GenerationProgress,
    GeneratorState,
    ProfileOptionConfig,
    ProfileSource,
    SimulationStep,
    StepDefinition,
)

__all__ = [
    "ContactLink",
    "CVData",
    "EducationEntry",
    "IconDetail",
    "LanguageEntry",
    "ProjectEntry",
    "SkillCategory",
    "SubProject",
    "create_icon",
    "PROFILE_OPTIONS",
    "GenerationProgress",
    "GeneratorState",
    "ProfileOptionConfig",
    "ProfileSource",
    "SimulationStep",
    "StepDefinition",
]
