"""CV page sections for Streamlit UI."""

from pathlib import Path

import streamlit as st

from cv_site.icons import material_icon
from cv_site.models.cv import ContactLink, CVData, ProjectEntry

# Static assets (profile image) live next to the app
STATIC_DIR = Path(__file__).parent.parent / "static"


def _contact_markdown(contact: ContactLink) -> str:
    """Icon plus text; icon-only contacts keep their label for screen readers."""
    icon = material_icon(contact.icon.name)
    label = contact.text if contact.show_text else ""
    return f"[{icon} {label}]({contact.href} \"{contact.aria_label}\")"


def render_header(cv: CVData) -> None:
    header = cv.header
    image_path = STATIC_DIR / header.profile_image
    if image_path.exists():
        img_col, text_col = st.columns([1, 5], gap="medium")
        with img_col:
            st.image(str(image_path), width=120)
    else:
        text_col = st.container()

    with text_col:
        st.markdown(f'<h1 class="cv-name">{header.name}</h1>', unsafe_allow_html=True)
        st.markdown(f'<p class="cv-title">{header.title}</p>', unsafe_allow_html=True)
        if header.contacts:
            st.markdown(" &nbsp; ".join(_contact_markdown(c) for c in header.contacts))


def render_profile(cv: CVData) -> None:
    st.subheader("Professional Profile")
    st.write(cv.profile.summary)


def render_skills(cv: CVData) -> None:
    if not cv.skills.categories:
        return
    st.subheader("Technical Skills")
    cols = st.columns(len(cv.skills.categories))
    for col, category in zip(cols, cv.skills.categories, strict=True):
        with col:
            st.markdown(f"**{category.title}**")
            st.markdown("\n".join(f"- {skill.name}" for skill in category.skills))


def _render_links(github_url: str | None, website_url: str | None = None) -> None:
    links = []
    if github_url:
        links.append(f"[{material_icon('github')} GitHub]({github_url})")
    if website_url:
        links.append(f"[{material_icon('external-link')} Website]({website_url})")
    if links:
        st.markdown(" &nbsp; ".join(links))


def _render_project(project: ProjectEntry) -> None:
    with st.container(border=True):
        st.markdown(f"#### {project.title}")
        _render_links(project.github_url, project.website_url)
        st.write(project.description)
        if project.features:
            st.markdown("\n".join(f"- {feature.text}" for feature in project.features))
        for sub in project.sub_projects:
            st.markdown(f"**{sub.name}**")
            _render_links(sub.github_url)
            st.caption(sub.description)
            if sub.features:
                st.markdown("\n".join(f"- {feature.text}" for feature in sub.features))


def render_projects(cv: CVData) -> None:
    if not cv.projects.projects:
        return
    st.subheader("Featured Projects")
    for project in cv.projects.projects:
        _render_project(project)


def render_education(cv: CVData) -> None:
    if not cv.education.entries:
        return
    st.subheader("Education")
    for entry in cv.education.entries:
        st.markdown(f"**{entry.degree}**  \n{entry.institution} · *{entry.period}*")


def render_languages(cv: CVData) -> None:
    if not cv.languages.entries:
        return
    st.subheader("Languages")
    for entry in cv.languages.entries:
        st.progress(entry.proficiency_percent, text=f"**{entry.language}** - {entry.level}")


def render_footer(cv: CVData) -> None:
    st.divider()
    st.markdown(
        f'<div class="cv-footer"><em>{cv.footer.references_text}</em><br>'
        f"© {cv.footer.copyright_name}</div>",
        unsafe_allow_html=True,
    )


def render_downloads(cv: CVData, key_prefix: str = "cv") -> None:
    """Download buttons for the printable CV."""
    from cv_site.output.markdown import format_cv
    from cv_site.output.pdf import generate_cv_pdf

    md_col, pdf_col, _ = st.columns([1, 1, 3])
    with md_col:
        st.download_button(
            "Download Markdown",
            data=format_cv(cv),
            file_name="cv.md",
            mime="text/markdown",
            key=f"{key_prefix}_download_md",
            use_container_width=True,
        )
    with pdf_col:
        try:
            pdf_bytes = generate_cv_pdf(cv)
        except Exception as e:
            st.error(f"PDF generation failed: {e}")
        else:
            st.download_button(
                "Download PDF",
                data=pdf_bytes,
                file_name="cv.pdf",
                mime="application/pdf",
                key=f"{key_prefix}_download_pdf",
                use_container_width=True,
            )


def render_cv(cv: CVData, key_prefix: str = "cv") -> None:
    """Render the whole CV page.

    Args:
        cv: CV content.
        key_prefix: Widget key prefix, needed when the page is rendered twice.
    """
    render_header(cv)
    st.divider()
    render_profile(cv)
    render_skills(cv)
    render_projects(cv)
    left, right = st.columns(2)
    with left:
        render_education(cv)
    with right:
        render_languages(cv)
    render_footer(cv)
    render_downloads(cv, key_prefix)
