"""Simulated CV generation.

A scripted sequence of narration/progress updates standing in for a real
generation pipeline. Each step shows its text, waits its duration and then
advances the percentage to ``elapsed / total``. A short final pause sets the
success text and pins the percentage to exactly 100.
"""

import logging
import time
from collections.abc import Callable

from cv_site.models.generator import GenerationProgress, JobInputType, SimulationStep

logger = logging.getLogger(__name__)

FINAL_DELAY_MS = 500
SUCCESS_TEXT = "CV generated successfully!"


def build_simulation_steps(job_input_type: JobInputType = "text") -> list[SimulationStep]:
    """Build the fixed narration script for a run.

    Args:
        job_input_type: How the job target was given; changes the wording of
            the job analysis step.

    Returns:
        Ordered simulation steps.
    """
    job_noun = "description" if job_input_type == "text" else "URL"
    return [
        SimulationStep(text="Analyzing profile data from sources...", duration_ms=1000),
        SimulationStep(text="Processing manual professional summary...", duration_ms=800),
        SimulationStep(text=f"Analyzing job {job_noun}...", duration_ms=1000),
        SimulationStep(text="Extracting relevant skills and keywords...", duration_ms=900),
        SimulationStep(text="Tailoring profile summary for job relevance...", duration_ms=1200),
        SimulationStep(
            text="Optimizing project descriptions and achievements...", duration_ms=1300
        ),
        SimulationStep(text="Finalizing CV structure and content...", duration_ms=800),
    ]


def total_duration_ms(steps: list[SimulationStep]) -> int:
    """Sum of all step durations, excluding the final pause."""
    return sum(step.duration_ms for step in steps)


class SimulatedGeneration:
    """Walks the simulation steps one at a time.

    Runs synchronously; ``sleep`` is injectable so callers (and tests) decide
    how waiting happens.
    """

    def __init__(
        self,
        steps: list[SimulationStep],
        sleep: Callable[[float], None] | None = None,
        time_scale: float = 1.0,
    ) -> None:
        if time_scale < 0:
            raise ValueError("time_scale must not be negative")
        self.steps = steps
        self.sleep = sleep or time.sleep
        self.time_scale = time_scale

    def _wait(self, duration_ms: int) -> None:
        self.sleep(duration_ms / 1000 * self.time_scale)

    def run(self, on_progress: Callable[[GenerationProgress], None]) -> GenerationProgress:
        """Run the script, reporting every update.

        Args:
            on_progress: Called when the narration changes (percentage
                unchanged) and again when the step's wait is over (percentage
                advanced).

        Returns:
            The final (done) progress update.
        """
        total = total_duration_ms(self.steps)
        elapsed = 0
        percent = 0.0

        for step in self.steps:
            on_progress(GenerationProgress(text=step.text, percent=percent))
            self._wait(step.duration_ms)
            elapsed += step.duration_ms
            if total > 0:
                percent = max(percent, min(elapsed / total * 100, 100.0))
            on_progress(GenerationProgress(text=step.text, percent=percent))
            logger.debug(f"Simulation step done: {step.text} ({percent:.0f}%)")

        self._wait(FINAL_DELAY_MS)
        final = GenerationProgress(text=SUCCESS_TEXT, percent=100.0, done=True)
        on_progress(final)
        return final
