"""Read-only store for the CV content."""

import logging
from functools import lru_cache
from pathlib import Path

from cv_site.config import get_settings
from cv_site.data.content import CV_CONTENT
from cv_site.models.cv import CVData

logger = logging.getLogger(__name__)


class CVDataStore:
    """Wraps the CV content and hands it to presentation components.

    The content models are frozen, so ``data`` can be shared as-is.
    """

    def __init__(self, data: CVData = CV_CONTENT) -> None:
        self._data = data

    @classmethod
    def from_file(cls, path: str | Path) -> "CVDataStore":
        """Load CV content from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content does not match CVData.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"CV content file not found: {path}")
        data = CVData.model_validate_json(path.read_text(encoding="utf-8"))
        logger.info(f"Loaded CV content from {path}")
        return cls(data)

    @property
    def data(self) -> CVData:
        return self._data

    @property
    def site_title(self) -> str:
        return self._data.site_title


@lru_cache
def get_cv_store() -> CVDataStore:
    """Get the cached CV store (content file from settings, else built-in content)."""
    settings = get_settings()
    if settings.content_file:
        return CVDataStore.from_file(settings.content_file)
    return CVDataStore()
