"""PDF export of the CV (the printable version of the site).

Renders CVData directly with fpdf2. Contact texts are always printed, also
for contacts shown as icon-only on the web.

Supported styles:
- plain: black on white, centered header
- modern: navy header band and accent section headers
"""

from dataclasses import dataclass
from enum import Enum

from fpdf import FPDF, XPos, YPos  # type: ignore[import-untyped]

from cv_site.models.cv import CVData, LanguageEntry, ProjectEntry


class CVStyle(str, Enum):
    """Available CV PDF styles."""

    PLAIN = "plain"
    MODERN = "modern"


@dataclass
class StyleConfig:
    """Configuration for a CV style."""

    # Colors (RGB tuples)
    accent_color: tuple[int, int, int]
    text_primary: tuple[int, int, int]
    text_secondary: tuple[int, int, int]
    text_muted: tuple[int, int, int]
    text_on_accent: tuple[int, int, int]
    divider_color: tuple[int, int, int]
    bar_background: tuple[int, int, int]

    # Typography
    name_size: int
    section_header_size: int
    entry_title_size: int
    body_size: int

    # Layout
    margin: float
    section_spacing: float
    use_header_band: bool
    header_band_height: float
    contact_separator: str


STYLE_CONFIGS: dict[CVStyle, StyleConfig] = {
    CVStyle.PLAIN: StyleConfig(
        accent_color=(0, 0, 0),
        text_primary=(0, 0, 0),
        text_secondary=(64, 64, 64),
        text_muted=(96, 96, 96),
        text_on_accent=(255, 255, 255),
        divider_color=(200, 200, 200),
        bar_background=(230, 230, 230),
        name_size=18,
        section_header_size=13,
        entry_title_size=11,
        body_size=10,
        margin=20.0,
        section_spacing=5.0,
        use_header_band=False,
        header_band_height=0.0,
        contact_separator=" | ",
    ),
    CVStyle.MODERN: StyleConfig(
        accent_color=(20, 50, 90),
        text_primary=(25, 30, 38),
        text_secondary=(55, 65, 80),
        text_muted=(90, 100, 115),
        text_on_accent=(255, 255, 255),
        divider_color=(220, 228, 238),
        bar_background=(235, 242, 250),
        name_size=24,
        section_header_size=11,
        entry_title_size=11,
        body_size=10,
        margin=20.0,
        section_spacing=8.0,
        use_header_band=True,
        header_band_height=34.0,
        contact_separator="  -  ",
    ),
}


def _to_latin1(text: str) -> str:
    """Map text onto the core-font character set.

    The built-in Helvetica only covers latin-1; typographic punctuation is
    replaced and anything else becomes '?'.
    """
    replacements = {
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
        "–": "-",
        "—": "-",
        "•": "-",
        "…": "...",
    }
    for char, replacement in replacements.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


class CVPDFGenerator(FPDF):
    """A4 CV document with section helpers."""

    def __init__(self, style: CVStyle = CVStyle.PLAIN) -> None:
        super().__init__(format="A4")
        self.style = style
        self.config = STYLE_CONFIGS[style]
        self.font_name = "Helvetica"
        self.set_auto_page_break(auto=True, margin=20)
        self.set_margins(left=self.config.margin, top=self.config.margin)

    def footer(self) -> None:
        """Page number on every page after the first."""
        if self.page_no() > 1:
            self.set_y(-15)
            self.set_font(self.font_name, "I", 8)
            self.set_text_color(*self.config.text_muted)
            self.cell(0, 10, f"Page {self.page_no()}", align="C")
            self.set_text_color(*self.config.text_primary)

    def add_paragraph(
        self, text: str, size: int | None = None, style: str = "", h: float = 5
    ) -> None:
        self.set_font(self.font_name, style, size or self.config.body_size)
        self.set_x(self.l_margin)
        self.multi_cell(0, h, _to_latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def add_bullet(self, text: str, indent: float = 0) -> None:
        self.set_font(self.font_name, "", self.config.body_size)
        self.set_x(self.l_margin + indent)
        self.multi_cell(
            0, 5, _to_latin1(f"- {text}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT
        )

    def add_name(self, name: str, title: str) -> None:
        if self.config.use_header_band:
            band = self.config.header_band_height
            self.set_fill_color(*self.config.accent_color)
            self.rect(x=0, y=0, w=self.w, h=band, style="F")
            self.set_xy(self.l_margin, band - 24)
            self.set_text_color(*self.config.text_on_accent)
            self.set_font(self.font_name, "B", self.config.name_size)
            self.cell(0, 10, _to_latin1(name.strip()), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_font(self.font_name, "", self.config.entry_title_size)
            self.cell(0, 6, _to_latin1(title.strip()), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_y(band + 4)
            self.set_text_color(*self.config.text_primary)
        else:
            self.set_font(self.font_name, "B", self.config.name_size)
            self.set_x(self.l_margin)
            self.multi_cell(
                0, 10, _to_latin1(name.strip()), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT
            )
            self.set_font(self.font_name, "", self.config.entry_title_size)
            self.set_text_color(*self.config.text_secondary)
            self.multi_cell(
                0, 6, _to_latin1(title.strip()), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT
            )
            self.set_text_color(*self.config.text_primary)
            self.ln(1)

    def add_contact_line(self, contacts: list[tuple[str, str]]) -> None:
        """Add contact texts as clickable links.

        Args:
            contacts: List of (display_text, href) tuples.
        """
        if not contacts:
            return
        self.set_font(self.font_name, "", self.config.body_size - 1)
        self.set_text_color(*self.config.text_secondary)
        separator = self.config.contact_separator
        total_width = sum(self.get_string_width(_to_latin1(text)) for text, _ in contacts)
        total_width += self.get_string_width(separator) * (len(contacts) - 1)
        usable = self.w - self.l_margin - self.r_margin

        if total_width > usable:
            # Too wide for one line: one contact per line
            for text, href in contacts:
                self.set_x(self.l_margin)
                self.cell(0, 5, _to_latin1(text), link=href, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        else:
            if self.style == CVStyle.PLAIN:
                self.set_x(self.l_margin + (usable - total_width) / 2)
            else:
                self.set_x(self.l_margin)
            for i, (text, href) in enumerate(contacts):
                if i:
                    self.cell(self.get_string_width(separator), 5, separator)
                label = _to_latin1(text)
                self.cell(self.get_string_width(label), 5, label, link=href)
            self.ln(5)

        self.set_text_color(*self.config.text_primary)
        self.ln(2)

    def add_section_header(self, title: str) -> None:
        self.ln(self.config.section_spacing / 2)
        self.set_font(self.font_name, "B", self.config.section_header_size)
        self.set_text_color(*self.config.accent_color)
        self.set_x(self.l_margin)
        self.cell(0, 7, _to_latin1(title.upper()), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_draw_color(*self.config.divider_color)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_text_color(*self.config.text_primary)
        self.ln(2)

    def add_project(self, project: ProjectEntry) -> None:
        self.add_paragraph(project.title, size=self.config.entry_title_size, style="B", h=6)
        links = [url for url in (project.github_url, project.website_url) if url]
        if links:
            self.set_text_color(*self.config.text_muted)
            self.add_paragraph("  ".join(links), size=self.config.body_size - 1)
            self.set_text_color(*self.config.text_primary)
        self.add_paragraph(project.description)
        for feature in project.features:
            self.add_bullet(feature.text, indent=3)
        for sub in project.sub_projects:
            self.ln(1)
            self.set_x(self.l_margin + 3)
            self.set_font(self.font_name, "B", self.config.body_size)
            self.multi_cell(0, 5, _to_latin1(sub.name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_x(self.l_margin + 3)
            self.set_font(self.font_name, "", self.config.body_size)
            self.multi_cell(
                0, 5, _to_latin1(sub.description), new_x=XPos.LMARGIN, new_y=YPos.NEXT
            )
            for feature in sub.features:
                self.add_bullet(feature.text, indent=6)
        self.ln(2)

    def add_skill_line(self, title: str, names: list[str]) -> None:
        """Bold category title followed by the skill names as plain text."""
        self.set_x(self.l_margin)
        self.set_font(self.font_name, "B", self.config.body_size)
        self.write(5, _to_latin1(f"{title}: "))
        self.set_font(self.font_name, "", self.config.body_size)
        self.write(5, _to_latin1(", ".join(names)))
        self.ln(5)

    def add_language(self, entry: LanguageEntry) -> None:
        """Language line with a proficiency bar."""
        bar_width = 40.0
        label = _to_latin1(f"{entry.language} - {entry.level}")
        self.set_font(self.font_name, "", self.config.body_size)
        self.set_x(self.l_margin)
        y = self.get_y()
        self.cell(0, 6, label, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        bar_x = self.w - self.r_margin - bar_width
        self.set_fill_color(*self.config.bar_background)
        self.rect(bar_x, y + 2, bar_width, 2.5, style="F")
        self.set_fill_color(*self.config.accent_color)
        filled = bar_width * entry.proficiency_percent / 100
        if filled > 0:
            self.rect(bar_x, y + 2, filled, 2.5, style="F")


def generate_cv_pdf(cv: CVData, style: CVStyle | str = CVStyle.PLAIN) -> bytes:
    """Render the CV as a PDF document.

    Args:
        cv: CV content.
        style: PDF style (plain or modern).

    Returns:
        PDF file content.
    """
    pdf = CVPDFGenerator(style=CVStyle(style))
    pdf.set_title(_to_latin1(cv.site_title))
    pdf.set_author(_to_latin1(cv.header.name))
    pdf.add_page()

    pdf.add_name(cv.header.name, cv.header.title)
    pdf.add_contact_line([(contact.text, contact.href) for contact in cv.header.contacts])

    pdf.add_section_header("Professional Profile")
    pdf.add_paragraph(cv.profile.summary)

    if cv.skills.categories:
        pdf.add_section_header("Technical Skills")
        for category in cv.skills.categories:
            pdf.add_skill_line(category.title, [skill.name for skill in category.skills])

    if cv.projects.projects:
        pdf.add_section_header("Featured Projects")
        for project in cv.projects.projects:
            pdf.add_project(project)

    if cv.education.entries:
        pdf.add_section_header("Education")
        for entry in cv.education.entries:
            pdf.add_paragraph(entry.degree, style="B")
            pdf.set_text_color(*pdf.config.text_secondary)
            pdf.add_paragraph(f"{entry.institution} | {entry.period}")
            pdf.set_text_color(*pdf.config.text_primary)
            pdf.ln(1)

    if cv.languages.entries:
        pdf.add_section_header("Languages")
        for entry in cv.languages.entries:
            pdf.add_language(entry)

    pdf.ln(pdf.config.section_spacing)
    pdf.set_text_color(*pdf.config.text_muted)
    pdf.set_font(pdf.font_name, "I", pdf.config.body_size - 1)
    pdf.set_x(pdf.l_margin)
    pdf.multi_cell(
        0,
        5,
        _to_latin1(f"{cv.footer.references_text}\n© {cv.footer.copyright_name}"),
        align="C",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )

    return bytes(pdf.output())
