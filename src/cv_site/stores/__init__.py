"""Session state stores."""

from cv_site.stores.cv_data import CVDataStore, get_cv_store
from cv_site.stores.generator import GeneratorStore

__all__ = ["CVDataStore", "GeneratorStore", "get_cv_store"]
