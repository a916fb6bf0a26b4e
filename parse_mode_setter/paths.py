"""Path constants shared by the settings classes."""

from pathlib import Path

# parse_mode_setter/paths.py -> repository root, where the .env file lives
PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
