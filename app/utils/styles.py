"""Custom styles for the CV Site Streamlit UI.

Inter for body text, a single teal accent for headings and the wizard, and
print rules that hide the app chrome so the CV page prints like a document.
"""

import streamlit as st

FONT_PRECONNECT = """
<link rel="preconnect" href="https://fonts.googleapis.com">
<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
"""

CV_CSS = """
<style>
    html, body, [class*="st-"], .stMarkdown, .stMarkdown * {
        font-family: 'Inter', sans-serif !important;
    }

    /* Code and material icons keep their own fonts */
    code, pre, .stCode, code *, pre * {
        font-family: 'JetBrains Mono', 'Fira Code', 'Consolas', monospace !important;
    }
    [data-testid="stIconMaterial"] {
        font-family: 'Material Symbols Rounded' !important;
    }

    /* CV header */
    h1.cv-name {
        margin: 0;
        padding: 0;
        letter-spacing: 0.04em;
    }
    p.cv-title {
        font-size: 1.15rem;
        color: #0f766e;
        margin: 0 0 0.5rem 0;
        font-weight: 500;
    }
    .stApp h3 {
        color: #0f766e;
        font-weight: 600 !important;
    }
    .cv-footer {
        text-align: center;
        color: #6b7280;
        font-size: 0.9rem;
    }

    /* Wizard step indicator */
    .wizard-step {
        padding: 0.4rem 0.75rem;
        border-radius: 6px;
        color: #6b7280;
        border: 1px solid #e5e7eb;
        text-align: center;
    }
    .wizard-step.active {
        color: #ffffff;
        background: #0f766e;
        border-color: #0f766e;
        font-weight: 600;
    }
    .wizard-step.done {
        color: #0f766e;
        border-color: #0f766e;
    }

    /* Print: only the CV */
    @media print {
        header, footer, [data-testid="stSidebar"], [data-testid="stToolbar"],
        .stButton, .stDownloadButton, [data-baseweb="tab-list"] {
            display: none !important;
        }
    }
</style>
"""


def apply_custom_styles() -> None:
    """Apply the CV Site fonts and styles.

    Call this at the beginning of app.py.
    """
    st.markdown(FONT_PRECONNECT, unsafe_allow_html=True)
    st.markdown(CV_CSS, unsafe_allow_html=True)
