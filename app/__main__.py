from pathlib import Path
import sys

from streamlit.web import cli as stcli


def main() -> None:
    """Launch Streamlit via `python -m app`; image assets are served from ./static."""
    script = Path(__file__).resolve().parents[1] / "streamlit_app.py"
    sys.argv = ["streamlit", "run", str(script), "--server.enableStaticServing=true"]
    stcli.main()


if __name__ == "__main__":
    main()
