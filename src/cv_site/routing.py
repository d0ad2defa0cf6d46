"""Locale-aware URL handling.

Non-base locales live under a path prefix (``/es/projects``); the base locale
has none (``/projects``). Routing always works on the delocalised path.
"""

from urllib.parse import urlsplit, urlunsplit

from cv_site.config import get_settings


def _resolve(locales: list[str] | None, base_locale: str | None) -> tuple[list[str], str]:
    if locales is None or base_locale is None:
        settings = get_settings()
        locales = settings.locales if locales is None else locales
        base_locale = settings.base_locale if base_locale is None else base_locale
    return locales, base_locale


def _split_prefix(path: str, locales: list[str], base_locale: str) -> tuple[str | None, str]:
    """Split a path into (locale prefix or None, remaining path)."""
    segments = path.split("/")
    # segments[0] is "" for absolute paths
    if len(segments) > 1 and segments[1] in locales and segments[1] != base_locale:
        rest = "/".join(segments[2:])
        return segments[1], "/" + rest
    return None, path or "/"


def extract_locale(
    url: str, locales: list[str] | None = None, base_locale: str | None = None
) -> str:
    """Return the locale a URL is in (its prefix, else the base locale)."""
    locales, base_locale = _resolve(locales, base_locale)
    locale, _ = _split_prefix(urlsplit(url).path, locales, base_locale)
    return locale or base_locale


def delocalize_url(
    url: str, locales: list[str] | None = None, base_locale: str | None = None
) -> str:
    """Strip the locale prefix from a URL, keeping query and fragment."""
    locales, base_locale = _resolve(locales, base_locale)
    parts = urlsplit(url)
    _, path = _split_prefix(parts.path, locales, base_locale)
    return urlunsplit(parts._replace(path=path))


def localize_url(
    url: str,
    locale: str,
    locales: list[str] | None = None,
    base_locale: str | None = None,
) -> str:
    """Rewrite a URL into the given locale.

    Raises:
        ValueError: If the locale is not configured.
    """
    locales, base_locale = _resolve(locales, base_locale)
    if locale not in locales:
        raise ValueError(f"Unknown locale '{locale}', expected one of {', '.join(locales)}")
    parts = urlsplit(url)
    _, path = _split_prefix(parts.path, locales, base_locale)
    if locale != base_locale:
        path = f"/{locale}" + ("" if path == "/" else path)
    return urlunsplit(parts._replace(path=path))


def reroute(url: str) -> str:
    """Pathname the router should resolve for a request URL."""
    return urlsplit(delocalize_url(url)).path or "/"
