"""
Action Runner I/O

Reads inputs from and reports outputs and failures to the GitHub
Actions runner.
"""

import os
import sys
import uuid
import logging


logger = logging.getLogger(__name__)


def get_input(name: str, required: bool = False) -> str:
    """Read an action input from its INPUT_* environment variable."""
    key = name.upper().replace(" ", "_")
    for candidate in (f"INPUT_{key}", f"INPUT_{key.replace('-', '_')}"):
        value = os.environ.get(candidate)
        if value is not None:
            value = value.strip()
            if value:
                return value

    if required:
        raise ValueError(f"Input required and not supplied: {name}")
    return ""


def set_output(name: str, value: str) -> None:
    """
    Append an output to the file named by GITHUB_OUTPUT.

    Uses the heredoc form so that multi-line values survive.
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        logger.info(f"GITHUB_OUTPUT not set, output '{name}' not written")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> None:
    """Report a failed run as an error annotation on the workflow."""
    logger.error(message)
    print(f"::error::{_escape_data(message)}")
    sys.stdout.flush()


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
