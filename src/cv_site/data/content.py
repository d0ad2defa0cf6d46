"""Built-in CV content.

This is the single source of truth for the CV. Edit ``CV_CONTENT`` to update
it, or point ``CV_SITE_CONTENT_FILE`` at a JSON file with the same shape.
"""

from cv_site.models.cv import (
    ContactLink,
    CVData,
    EducationData,
    EducationEntry,
    FooterData,
    HeaderData,
    LanguageEntry,
    LanguagesData,
    ProfileData,
    ProjectEntry,
    ProjectFeature,
    ProjectsData,
    Skill,
    SkillCategory,
    SkillsData,
    SubProject,
    create_icon,
)


def _features(*texts: str) -> list[ProjectFeature]:
    return [ProjectFeature(text=text) for text in texts]


def _skills(*names: str) -> list[Skill]:
    return [Skill(name=name) for name in names]


CV_CONTENT = CVData(
    site_title="Your Name - Curriculum Vitae",
    header=HeaderData(
        name="YOUR FULL NAME",
        title="Your Professional Title | Your Specialty",
        profile_image="images/generic-male.jpeg",
        contacts=[
            ContactLink(
                href="mailto:your.email@example.com",
                text="your.email@example.com",
                icon=create_icon("mail"),
                aria_label="Email Address",
                show_text=True,
            ),
            ContactLink(
                href="tel:+1234567890",
                text="+1 (234) 567 890",
                icon=create_icon("phone"),
                aria_label="Phone Number",
                show_text=True,
            ),
            ContactLink(
                href="https://www.linkedin.com/in/yourprofile/",
                text="LinkedIn",
                icon=create_icon("linkedin"),
                aria_label="LinkedIn Profile",
                show_text=False,
            ),
            ContactLink(
                href="https://github.com/yourusername",
                text="GitHub",
                icon=create_icon("github"),
                aria_label="GitHub Profile",
                show_text=False,
            ),
        ],
    ),
    profile=ProfileData(
        summary=(
            "A concise summary of your professional background, key skills, and career "
            "aspirations. Highlight your expertise and what makes you a valuable candidate. "
            "This text should be 3-5 sentences long."
        ),
    ),
    skills=SkillsData(
        categories=[
            SkillCategory(
                title="Programming Languages",
                skills=_skills(
                    "Language 1 (Frameworks, Libraries)",
                    "Language 2 (Frameworks, Libraries)",
                    "Language 3",
                    "Database Language (e.g., SQL)",
                ),
            ),
            SkillCategory(
                title="Infrastructure & DevOps",
                skills=_skills(
                    "Containerization (Docker, Kubernetes)",
                    "CI/CD Platforms (e.g., GitHub Actions, Jenkins)",
                    "Cloud Platforms (e.g., AWS, GCP, Azure)",
                    "Version Control (Git)",
                ),
            ),
            SkillCategory(
                title="Architecture & Design",
                skills=_skills(
                    "Microservices",
                    "RESTful APIs",
                    "Type-Safe Architectures",
                    "Asynchronous Processing",
                ),
            ),
        ],
    ),
    projects=ProjectsData(
        projects=[
            ProjectEntry(
                title="Example Project 1: Dynamic Data Platform",
                github_url="https://github.com/yourusername/example-project-1",
                website_url="https://example-project-1-live.com",
                description=(
                    "A brief description of this project's purpose and impact. This could be "
                    "a web app, a system, or a significant contribution."
                ),
                features=_features(
                    "Developed feature X using Technology A, leading to result Y.",
                    "Implemented functionality B with Framework C, improving D.",
                    "Contributed to Z, showcasing skill M and N.",
                ),
                sub_projects=[
                    SubProject(
                        name="Sub-project Alpha",
                        github_url="https://github.com/yourusername/sub-project-alpha",
                        description="Focus on a specific component or aspect of the main project.",
                        features=_features(
                            "Designed and built component ABC for data processing.",
                            "Optimized performance of module XYZ by P%.",
                        ),
                    ),
                ],
            ),
            ProjectEntry(
                title="Example Project 2: Mobile Utility App",
                github_url="https://github.com/yourusername/example-project-2",
                description=(
                    "This project demonstrates your skills in a different domain, perhaps "
                    "mobile development or a specific algorithm."
                ),
                features=_features(
                    "Applied advanced algorithm for real-time data analysis.",
                    "Created a user-friendly interface with modern UI/UX principles.",
                    "Managed end-to-end development cycle from concept to deployment.",
                ),
            ),
        ],
    ),
    education=EducationData(
        entries=[
            EducationEntry(
                institution="University Name, City",
                degree="Your Degree | Major",
                period="Start Year - End Year (or Present)",
            ),
            EducationEntry(
                institution="Another Institution (e.g., College, Technical School)",
                degree="Your Diploma/Certificate | Field of Study",
                period="Start Year - End Year",
            ),
        ],
    ),
    languages=LanguagesData(
        entries=[
            LanguageEntry(
                language="Your Native Language",
                level="Native",
                proficiency_percent=100,
            ),
            LanguageEntry(
                language="Another Language (e.g., English)",
                level="Proficiency Level (e.g., B2, Advanced)",
                proficiency_percent=75,
            ),
        ],
    ),
    footer=FooterData(
        references_text="References available upon request",
        copyright_name="Your Full Name",
    ),
)
