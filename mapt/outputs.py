"""Writing stack outputs to files."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger("mapt")


def write_outputs(
    outputs: Mapping[str, Any],
    destination_folder: str | os.PathLike | None,
    results: Mapping[str, str],
) -> list[str]:
    """Write selected string outputs to files in ``destination_folder``.

    ``results`` maps output keys to file names. Outputs that are missing or
    not strings are skipped. Nothing is written when no folder is given.
    Returns the paths written.
    """
    if not destination_folder:
        return []
    written = []
    for key, file_name in results.items():
        value = outputs.get(key)
        if not isinstance(value, str):
            logger.debug("error getting %s", key)
            continue
        path = os.path.join(destination_folder, file_name)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(value)
        written.append(path)
    return written