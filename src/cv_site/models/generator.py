"""AI CV generator wizard models."""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Open-ended tag: 'github', 'linkedin', 'other', ...
ProfileSourceType = str

JobInputType = Literal["url", "text"]

# Profile source type that may appear any number of times
NON_UNIQUE_SOURCE_TYPE = "other"


def new_source_id() -> str:
    """Generate a unique profile source id."""
    return str(uuid.uuid4())


class ProfileSource(BaseModel):
    """A link or handle the user wants the CV built from."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_source_id)
    type: ProfileSourceType
    value: str = ""


class ProfileOptionConfig(BaseModel):
    """A selectable profile source type."""

    model_config = ConfigDict(frozen=True)

    type: ProfileSourceType
    name: str
    icon: str
    placeholder: str


# Source of truth for profile source types. To add a type (e.g. 'twitter'),
# add an entry here; anything but 'other' is unique per wizard.
PROFILE_OPTIONS: list[ProfileOptionConfig] = [
    ProfileOptionConfig(
        type="github",
        name="GitHub",
        icon="github",
        placeholder="e.g., octocat or full URL",
    ),
    ProfileOptionConfig(
        type="linkedin",
        name="LinkedIn",
        icon="linkedin",
        placeholder="e.g., your-linkedin-profile-url",
    ),
    ProfileOptionConfig(
        type="other",
        name="Other URL",
        icon="link",
        placeholder="https://example.com/portfolio",
    ),
]


def get_profile_option(source_type: ProfileSourceType) -> ProfileOptionConfig | None:
    """Look up the option config for a source type."""
    for option in PROFILE_OPTIONS:
        if option.type == source_type:
            return option
    return None


class GeneratorState(BaseModel):
    """State of the generator wizard for one session.

    Mutated in place by GeneratorStore; assignments are validated so the
    progress and step bounds always hold.
    """

    model_config = ConfigDict(validate_assignment=True)

    current_step: int = Field(default=1, ge=1)
    profile_sources: list[ProfileSource] = Field(default_factory=list)
    manual_professional_summary: str = ""
    job_input_type: JobInputType = "text"
    job_target_value: str = ""

    # Generation status
    is_generating: bool = False
    generation_step_text: str = ""
    generation_progress: float = Field(default=0.0, ge=0.0, le=100.0)
    show_success: bool = False
    error_message: str = ""

    # Visibility of the whole generator UI
    show_generator: bool = True


@dataclass(frozen=True)
class StepDefinition:
    """One page of the wizard with its validity gate."""

    id: int
    title: str
    icon: str
    is_valid: Callable[[GeneratorState], bool]


class SimulationStep(BaseModel):
    """A narration line and how long it stays on screen."""

    model_config = ConfigDict(frozen=True)

    text: str
    duration_ms: int = Field(ge=0)


class GenerationProgress(BaseModel):
    """Progress update emitted by the simulated generation."""

    model_config = ConfigDict(frozen=True)

    text: str
    percent: float = Field(ge=0.0, le=100.0)
    done: bool = False
