"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from cv_site.config import get_settings
from cv_site.data.content import CV_CONTENT
from cv_site.models.cv import CVData
from cv_site.stores.cv_data import get_cv_store
from cv_site.stores.generator import GeneratorStore


class SleepRecorder:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture(autouse=True)
def clear_cached_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the developer's environment and cached singletons."""
    for key in [
        "CV_SITE_CONTENT_FILE",
        "CV_SITE_LOCALES",
        "CV_SITE_BASE_LOCALE",
        "CV_SITE_SIMULATION_TIME_SCALE",
        "CV_SITE_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    get_cv_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_cv_store.cache_clear()


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    """Sleep function that returns immediately."""
    return SleepRecorder()


@pytest.fixture
def store(sleep_recorder: SleepRecorder) -> GeneratorStore:
    """Fresh generator store that never really waits."""
    return GeneratorStore(sleep=sleep_recorder)


@pytest.fixture
def ready_store(store: GeneratorStore) -> GeneratorStore:
    """Store on the last step with valid inputs."""
    store.update_profile_source(store.state.profile_sources[0].id, new_value="octocat")
    store.next_step()
    store.update_job_target_value("Senior Python Developer")
    return store


@pytest.fixture
def sample_cv_data() -> CVData:
    """The built-in CV content."""
    return CV_CONTENT


@pytest.fixture
def cv_content_file(tmp_path: Path, sample_cv_data: CVData) -> Path:
    """CV content written to a JSON file with a custom name."""
    data = sample_cv_data.model_dump()
    data["header"]["name"] = "Ada Lovelace"
    data["site_title"] = "Ada Lovelace - CV"
    path = tmp_path / "cv.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
