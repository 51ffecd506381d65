"""Small helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def get_user_home_directory() -> Path | None:
    """Return the user's home directory from the environment, or None if unset."""
    variable = "USERPROFILE" if os.name == "nt" else "HOME"
    home = os.environ.get(variable)
    if home is None:
        if os.name != "nt":
            print("Warning: HOME environment variable not set.", file=sys.stderr)
        return None
    return Path(home)