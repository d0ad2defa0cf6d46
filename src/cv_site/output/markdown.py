"""Markdown output formatting."""

from pathlib import Path

from cv_site.models.cv import ContactLink, CVData, ProjectEntry


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_contact(contact: ContactLink) -> str:
    """Format a contact as a markdown link (print layout: text always shown)."""
    return f"[{contact.text}]({contact.href})"


def _format_project(project: ProjectEntry) -> list[str]:
    output = [f"### {project.title}"]
    links = []
    if project.github_url:
        links.append(f"[GitHub]({project.github_url})")
    if project.website_url:
        links.append(f"[Website]({project.website_url})")
    if links:
        output.append(" | ".join(links))
    output.append("")
    output.append(project.description)

    if project.features:
        output.append("")
        for feature in project.features:
            output.append(f"- {feature.text}")

    for sub in project.sub_projects:
        output.append("")
        title = f"#### {sub.name}"
        if sub.github_url:
            title += f" ([GitHub]({sub.github_url}))"
        output.append(title)
        output.append("")
        output.append(sub.description)
        if sub.features:
            output.append("")
            for feature in sub.features:
                output.append(f"- {feature.text}")

    output.append("")
    return output


def format_cv(cv: CVData) -> str:
    """Format the complete CV as markdown.

    Args:
        cv: CV content.

    Returns:
        Markdown document, sections in page order.
    """
    output = [f"# {cv.header.name}", f"**{cv.header.title}**", ""]

    if cv.header.contacts:
        output.append(" | ".join(format_contact(c) for c in cv.header.contacts))
        output.append("")

    output.append("## Professional Profile")
    output.append(cv.profile.summary)
    output.append("")

    if cv.skills.categories:
        output.append("## Technical Skills")
        for category in cv.skills.categories:
            names = ", ".join(skill.name for skill in category.skills)
            output.append(f"- **{category.title}:** {names}")
        output.append("")

    if cv.projects.projects:
        output.append("## Featured Projects")
        output.append("")
        for project in cv.projects.projects:
            output.extend(_format_project(project))

    if cv.education.entries:
        output.append("## Education")
        for entry in cv.education.entries:
            output.append(f"- **{entry.degree}** - {entry.institution} ({entry.period})")
        output.append("")

    if cv.languages.entries:
        output.append("## Languages")
        for entry in cv.languages.entries:
            output.append(f"- **{entry.language}:** {entry.level}")
        output.append("")

    output.append("---")
    output.append(f"*{cv.footer.references_text}*")
    output.append("")
    output.append(f"© {cv.footer.copyright_name}")

    return "\n".join(output) + "\n"
