"""Streamlit web UI for CV Site."""

import logging
import sys
from pathlib import Path

# Add project root and src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))
sys.path.insert(0, str(Path(__file__).parent))

# Load environment variables from .env.local
from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env.local")

import streamlit as st  # noqa: E402
from components.cv_sections import render_cv  # noqa: E402
from components.generator import (  # noqa: E402
    get_generator_store,
    render_generator,
    start_over,
)
from pydantic import ValidationError  # noqa: E402
from utils.styles import apply_custom_styles  # noqa: E402

from cv_site.config import get_settings, setup_logging  # noqa: E402
from cv_site.stores.cv_data import CVDataStore, get_cv_store  # noqa: E402

logger = logging.getLogger(__name__)


def render_content_error(error: Exception) -> None:
    """Show why the CV content could not be loaded."""
    if isinstance(error, FileNotFoundError):
        st.error(f"**CV content not found:** {error}")
        return
    st.error("**Invalid CV content file**")
    st.markdown("Check that the file matches the CV content structure.")
    with st.expander("Technical Details", expanded=False):
        st.code(str(error), language=None)


def resolve_locale() -> str:
    """Locale from the `lang` query parameter, else the base locale."""
    settings = get_settings()
    requested = st.query_params.get("lang")
    if requested in settings.locales:
        return requested
    if requested:
        logger.warning(f"Unsupported locale requested: {requested}")
    return settings.base_locale


def render_locale_links(current: str) -> None:
    """Links to the page in every configured locale."""
    settings = get_settings()
    if len(settings.locales) < 2:
        return
    links = []
    for locale in settings.locales:
        if locale == current:
            links.append(f"**{locale.upper()}**")
        else:
            links.append(f"[{locale.upper()}](?lang={locale})")
    st.caption(" · ".join(links))


def main():
    """Main Streamlit application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    cv_store: CVDataStore | None = None
    content_error: Exception | None = None
    try:
        cv_store = get_cv_store()
    except (FileNotFoundError, ValidationError) as e:
        logger.exception("Could not load CV content")
        content_error = e

    # Page configuration must be the first Streamlit call
    st.set_page_config(
        page_title=cv_store.site_title if cv_store else "Curriculum Vitae",
        page_icon=":material/description:",
        layout="wide",
    )
    apply_custom_styles()

    if cv_store is None:
        render_content_error(content_error)
        return

    render_locale_links(resolve_locale())

    generator = get_generator_store()
    cv_tab, generator_tab = st.tabs(["Curriculum Vitae", "AI CV Generator"])

    with cv_tab:
        render_cv(cv_store.data, key_prefix="cv")

    with generator_tab:
        if generator.state.show_generator:
            render_generator(generator)
        else:
            st.info("Here is your generated CV.")
            st.button("Generate another", on_click=start_over, args=(generator,))
            render_cv(cv_store.data, key_prefix="generated")


if __name__ == "__main__":
    main()
