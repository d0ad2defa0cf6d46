"""Example inputs for the generator wizard ("Fill example data")."""

EXAMPLE_PROFILE_SOURCES: list[tuple[str, str]] = [
    ("github", "yrrrrrf"),
    ("linkedin", "https://www.linkedin.com/in/fernando-reza-campos/"),
    ("other", "https://yrrrrrf.com"),
]

EXAMPLE_SUMMARY = (
    "Highly motivated Senior Software Engineer with 7+ years of experience in building "
    "scalable web applications. Proven ability to lead cross-functional teams, implement "
    "robust backend services using Node.js and Rust, and deliver intuitive user interfaces "
    "with Svelte and React. Passionate about cloud-native solutions (AWS, GCP) and improving "
    "developer workflows through CI/CD best practices. Seeking to leverage deep technical "
    "expertise and leadership skills to drive impactful projects at a forward-thinking tech "
    "company."
)

EXAMPLE_JOB_DESCRIPTION = """Senior Full Stack Developer - Tech Company

We are looking for a Senior Full Stack Developer to join our growing team.

Requirements:
• 3+ years of experience with React and Node.js
• Experience with cloud platforms (AWS, GCP)
• Strong knowledge of database design
• Experience with CI/CD pipelines
• Leadership and mentoring experience preferred

Responsibilities:
• Lead development of customer-facing applications
• Mentor junior developers
• Collaborate with product and design teams
• Implement best practices and code reviews"""

EXAMPLE_JOB_URL = "https://careers.example.com/job/senior-fullstack-dev-12345"
