"""State store for the AI CV generator wizard."""

import logging
from collections.abc import Callable

from cv_site.data.examples import (
    EXAMPLE_JOB_DESCRIPTION,
    EXAMPLE_PROFILE_SOURCES,
    EXAMPLE_SUMMARY,
)
from cv_site.generation import SimulatedGeneration, build_simulation_steps
from cv_site.models.generator import (
    NON_UNIQUE_SOURCE_TYPE,
    PROFILE_OPTIONS,
    GenerationProgress,
    GeneratorState,
    JobInputType,
    ProfileOptionConfig,
    ProfileSource,
    ProfileSourceType,
    StepDefinition,
)

logger = logging.getLogger(__name__)


def _has_profile_data(state: GeneratorState) -> bool:
    has_valid_source = any(source.value.strip() for source in state.profile_sources)
    has_manual_summary = bool(state.manual_professional_summary.strip())
    return has_valid_source or has_manual_summary


def _has_job_target(state: GeneratorState) -> bool:
    return bool(state.job_target_value.strip())


STEPS: list[StepDefinition] = [
    StepDefinition(id=1, title="Profile Data", icon="user", is_valid=_has_profile_data),
    StepDefinition(id=2, title="Target Job", icon="briefcase", is_valid=_has_job_target),
]


def _initial_state() -> GeneratorState:
    first_type = PROFILE_OPTIONS[0].type if PROFILE_OPTIONS else NON_UNIQUE_SOURCE_TYPE
    return GeneratorState(profile_sources=[ProfileSource(type=first_type)])


class GeneratorStore:
    """Holds the wizard state and the mutations the UI may call.

    One instance per session. Validation problems are reported through
    ``state.error_message``; nothing here raises for user mistakes.
    """

    def __init__(
        self,
        sleep: Callable[[float], None] | None = None,
        time_scale: float = 1.0,
    ) -> None:
        self._state = _initial_state()
        self.steps = list(STEPS)
        self.sleep = sleep
        self.time_scale = time_scale

    # --- Derived state ---

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_step_definition(self) -> StepDefinition | None:
        if 0 < self._state.current_step <= len(self.steps):
            return self.steps[self._state.current_step - 1]
        return None

    @property
    def is_next_button_disabled(self) -> bool:
        step_def = self.current_step_definition
        if step_def is None:
            return True
        return not step_def.is_valid(self._state)

    @property
    def is_last_step(self) -> bool:
        return self._state.current_step >= self.total_steps

    def _check_current_step(self, action: str) -> bool:
        """Validate the current step, setting the error message on failure."""
        step_def = self.current_step_definition
        if step_def is None or not step_def.is_valid(self._state):
            title = step_def.title if step_def else "the current step"
            self._state.error_message = (
                f"Please complete all required fields for {title} before {action}."
            )
            logger.warning(f"Step {self._state.current_step} incomplete, cannot {action}")
            return False
        return True

    # --- Navigation ---

    def next_step(self) -> None:
        if not self._check_current_step("proceeding"):
            return
        self._state.error_message = ""
        if self._state.current_step < self.total_steps:
            self._state.current_step += 1
            logger.debug(f"Advanced to step {self._state.current_step}")

    def prev_step(self) -> None:
        if self._state.current_step > 1:
            self._state.current_step -= 1
            self._state.error_message = ""
            logger.debug(f"Went back to step {self._state.current_step}")

    # --- Profile sources ---

    def add_profile_source(self) -> ProfileSource:
        """Append an empty source; 'other' is always allowed."""
        source = ProfileSource(type=NON_UNIQUE_SOURCE_TYPE)
        self._state.profile_sources = [*self._state.profile_sources, source]
        logger.debug(f"Added profile source {source.id}")
        return source

    def remove_profile_source(self, id_to_remove: str) -> None:
        self._state.profile_sources = [
            source for source in self._state.profile_sources if source.id != id_to_remove
        ]

    def update_profile_source(
        self,
        id_to_update: str,
        new_type: ProfileSourceType | None = None,
        new_value: str | None = None,
    ) -> None:
        updated = []
        for source in self._state.profile_sources:
            if source.id == id_to_update:
                source = source.model_copy(
                    update={
                        "type": new_type if new_type is not None else source.type,
                        "value": new_value if new_value is not None else source.value,
                    }
                )
            updated.append(source)
        self._state.profile_sources = updated

    def available_profile_options(self, source_id: str) -> list[ProfileOptionConfig]:
        """Options selectable for a source: unique types not taken by another source."""
        taken = {
            source.type
            for source in self._state.profile_sources
            if source.id != source_id and source.type != NON_UNIQUE_SOURCE_TYPE
        }
        return [option for option in PROFILE_OPTIONS if option.type not in taken]

    def update_manual_summary(self, summary: str) -> None:
        self._state.manual_professional_summary = summary

    # --- Job target ---

    def update_job_input_type(self, input_type: JobInputType) -> None:
        self._state.job_input_type = input_type
        self._state.job_target_value = ""

    def update_job_target_value(self, value: str) -> None:
        self._state.job_target_value = value

    # --- Data & generation flow ---

    def fill_example_data(self) -> None:
        self._state.profile_sources = [
            ProfileSource(type=source_type, value=value)
            for source_type, value in EXAMPLE_PROFILE_SOURCES
        ]
        self._state.manual_professional_summary = EXAMPLE_SUMMARY
        self._state.job_input_type = "text"
        self._state.job_target_value = EXAMPLE_JOB_DESCRIPTION
        self.reset_generation_status()
        logger.info("Filled generator with example data")

    def clear_all_data(self) -> None:
        self._state.profile_sources = [ProfileSource(type=NON_UNIQUE_SOURCE_TYPE)]
        self._state.manual_professional_summary = ""
        self._state.job_input_type = "text"
        self._state.job_target_value = ""
        self._state.current_step = 1
        self.reset_generation_status()
        self._state.show_generator = True
        logger.info("Cleared generator data")

    def reset_generation_status(self) -> None:
        self._state.error_message = ""
        self._state.is_generating = False
        self._state.show_success = False
        self._state.generation_progress = 0.0
        self._state.generation_step_text = ""

    def _apply_progress(self, update: GenerationProgress) -> None:
        self._state.generation_step_text = update.text
        self._state.generation_progress = update.percent
        if update.done:
            self._state.is_generating = False
            self._state.show_success = True

    def start_generation(
        self,
        sleep: Callable[[float], None] | None = None,
        on_progress: Callable[[GenerationProgress], None] | None = None,
    ) -> bool:
        """Run the simulated generation for the current inputs.

        Args:
            sleep: Overrides the store's sleep function for this run.
            on_progress: Called after each update has been applied to the state.

        Returns:
            True if the run completed, False if it was rejected.
        """
        if self._state.is_generating:
            self._state.error_message = "Generation is already in progress."
            logger.warning("Generation already in progress, ignoring start request")
            return False
        if not self._check_current_step("generating"):
            return False

        self.reset_generation_status()
        self._state.is_generating = True
        logger.info(f"Starting simulated generation ({self._state.job_input_type} job input)")

        def _handle(update: GenerationProgress) -> None:
            self._apply_progress(update)
            if on_progress:
                on_progress(update)

        engine = SimulatedGeneration(
            build_simulation_steps(self._state.job_input_type),
            sleep=sleep or self.sleep,
            time_scale=self.time_scale,
        )
        try:
            engine.run(_handle)
        finally:
            # An abandoned run (e.g. Streamlit stopping the script) must not
            # leave the store locked
            if self._state.is_generating:
                self._state.is_generating = False
                logger.warning("Simulated generation interrupted")
        logger.info("Simulated generation finished")
        return True

    def view_generated_cv(self) -> None:
        """Hide the generator so the page shows the CV."""
        self._state.show_generator = False

    def generate_another(self) -> None:
        self.clear_all_data()
