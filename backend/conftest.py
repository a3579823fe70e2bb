# Ensure 'backend/' is on sys.path so 'import fitmarket.*' works
# even when pytest is started from the repo root without an install.
import os
from pathlib import Path
import sys

_BACKEND_ROOT = Path(__file__).resolve().parent  # <repo>/backend
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

# Unit tests run against an in-memory database unless told otherwise
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
