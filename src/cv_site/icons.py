"""Icon name to Streamlit material icon mapping."""

DEFAULT_ICON = ":material/link:"

MATERIAL_ICONS: dict[str, str] = {
    "mail": ":material/mail:",
    "phone": ":material/call:",
    "linkedin": ":material/work:",
    "github": ":material/code:",
    "link": ":material/link:",
    "external-link": ":material/open_in_new:",
    "user": ":material/person:",
    "briefcase": ":material/business_center:",
}


def material_icon(name: str | None) -> str:
    """Return the material shortcode for an icon name, or the link icon."""
    if not name:
        return DEFAULT_ICON
    return MATERIAL_ICONS.get(name.lower(), DEFAULT_ICON)
