"""Runtime configuration. The only module that reads the environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv("CONTENT_EDITOR_DB", str(Path.home() / ".nst_content" / "local.db"))

# Empty means no remote store: the editor works from the local store only.
REMOTE_URL = os.getenv("CONTENT_REMOTE_URL", "").rstrip("/")
REMOTE_TIMEOUT = float(os.getenv("CONTENT_REMOTE_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("CONTENT_LOG_LEVEL", "WARNING").upper()
