"""Environment source for settings resolution.

The dotenv file is read into a plain mapping instead of being pushed into
``os.environ`` so callers (and tests) can pass a fixed mapping instead.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from dotenv import dotenv_values

logger: Final = logging.getLogger(__name__)


def load_environment(
    env_file: Path | None = None, environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Merge a dotenv file with the process environment.

    Values already present in the process environment win over the file,
    matching how ``load_dotenv`` behaves without ``override``.

    Args:
        env_file: dotenv-style file to read (skipped when None)
        environ: Environment to merge over the file (default: ``os.environ``)

    Returns:
        A new mapping of variable names to values
    """
    merged: dict[str, str] = {}
    if env_file is not None:
        if env_file.is_file():
            values = dotenv_values(env_file)
            merged.update({k: v for k, v in values.items() if v is not None})
            logger.debug("Loaded %d value(s) from %s", len(merged), env_file)
        else:
            logger.warning(
                "Could not load %s file. Falling back to system environment variables.",
                env_file,
            )

    merged.update(os.environ if environ is None else environ)
    return merged
