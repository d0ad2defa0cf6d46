"""Launcher for the CV Site web UI (``cv-site-web``)."""

import subprocess
import sys
from pathlib import Path


def main() -> None:
    """Start Streamlit on app.py; extra arguments go to ``streamlit run``."""
    app_path = Path(__file__).parent / "app.py"
    command = [sys.executable, "-m", "streamlit", "run", str(app_path), *sys.argv[1:]]
    stop_hint = "⌃C (Control+C)" if sys.platform == "darwin" else "Ctrl+C"
    print(f"Serving CV Site - press {stop_hint} to stop the server")
    try:
        result = subprocess.run(command)
    except KeyboardInterrupt:
        return
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
