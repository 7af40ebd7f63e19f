from __future__ import annotations

import os
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent

root_path = str(ROOT_DIR)
if root_path not in sys.path:
    sys.path.insert(0, root_path)


def _ensure_test_env() -> None:
    # Keep developer .env overrides out of the test run
    for key in list(os.environ):
        if key.startswith("TABULAR_"):
            os.environ.pop(key)
    os.environ.setdefault("TABULAR_LOG_LEVEL", "WARNING")


_ensure_test_env()
