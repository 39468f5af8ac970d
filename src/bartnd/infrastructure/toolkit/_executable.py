"""
Location of the BART executable.

Resolution policy
-----------------
Unless an explicit path is given, the executable is searched in this order:

1. ``BART_EXECUTABLE``: full path of the executable,
2. ``TOOLBOX_PATH``: BART installation directory (BART's own convention);
   ``<TOOLBOX_PATH>/bart`` is tried,
3. the ``PATH`` (``shutil.which``).

The result of the default search is cached; call
``find_bart_executable.cache_clear()`` after changing the environment.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ...domain._errors import BartError

logger = logging.getLogger(__name__)

BART_EXECUTABLE_ENV = "BART_EXECUTABLE"
TOOLBOX_PATH_ENV = "TOOLBOX_PATH"


def _executable_name() -> str:
    """Return the platform-specific file name of the BART executable."""
    return "bart.exe" if sys.platform.startswith("win") else "bart"


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


@lru_cache(maxsize=1)
def find_bart_executable(path: Optional[str] = None) -> Path:
    """
    Resolve the BART executable.

    Parameters
    ----------
    path : Optional[str]
        Exact executable to use. If provided, this path always wins and no
        search occurs.

    Returns
    -------
    Path
        Absolute path of an executable file.

    Raises
    ------
    BartError
        If the executable cannot be found; the message lists every location
        that was tried.
    """
    if path is not None:
        candidate = Path(path).resolve()
        if not _is_executable(candidate):
            raise BartError(f"BART executable not found: {candidate}")
        return candidate

    tried: list[str] = []

    explicit = os.environ.get(BART_EXECUTABLE_ENV, "")
    if explicit:
        candidate = Path(explicit).resolve()
        if _is_executable(candidate):
            logger.debug("using BART from %s: %s", BART_EXECUTABLE_ENV, candidate)
            return candidate
        tried.append(f"- {candidate} (from {BART_EXECUTABLE_ENV})")

    toolbox = os.environ.get(TOOLBOX_PATH_ENV, "")
    if toolbox:
        candidate = (Path(toolbox) / _executable_name()).resolve()
        if _is_executable(candidate):
            logger.debug("using BART from %s: %s", TOOLBOX_PATH_ENV, candidate)
            return candidate
        tried.append(f"- {candidate} (from {TOOLBOX_PATH_ENV})")

    found = shutil.which(_executable_name())
    if found is not None:
        logger.debug("using BART from PATH: %s", found)
        return Path(found).resolve()
    tried.append(f"- {_executable_name()} (on PATH)")

    raise BartError("Could not find the BART executable. Tried:\n" + "\n".join(tried))
