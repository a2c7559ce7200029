"""Entry point for `streamlit run streamlit_app.py` and Streamlit Cloud.

Streamlit serves ./static next to this file, which holds the card images.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.app import main  # noqa: E402

main()
