"""GitHub Actions step outputs.

Writes ``name<<delimiter`` blocks to the file named by ``$GITHUB_OUTPUT``,
the multiline form understood by the Actions runner.
"""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"


def format_output(name: str, value: str, delimiter: Optional[str] = None) -> str:
    """Return the output-file block for one named value.

    Raises:
        ValueError: If the delimiter appears in the name or value.
    """
    delimiter = delimiter or f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: delimiter {delimiter!r} found in output")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(name: str, value: str, output_file: Optional[Path] = None) -> bool:
    """Append a step output; return ``False`` when no output file is known."""
    target = output_file or os.environ.get(GITHUB_OUTPUT_ENV)
    if not target:
        logger.debug("%s is not set; output '%s' not written", GITHUB_OUTPUT_ENV, name)
        return False

    with open(target, "a", encoding="utf-8") as fh:
        fh.write(format_output(name, value))
    logger.debug("Wrote step output '%s' to %s", name, target)
    return True
