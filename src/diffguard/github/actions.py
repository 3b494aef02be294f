"""
GitHub Actions Workflow Commands

Inputs, outputs and annotations for a job running on GitHub Actions.
"""

import logging
import os
import sys
import uuid
from typing import Mapping, Optional


logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False, default: Optional[str] = None,
              environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Read an action input.

    Args:
        name: Input name as declared in action.yml
        required: Raise if the input is missing or blank
        default: Value used when the input is missing or blank
        environ: Environment mapping (default: os.environ)

    Returns:
        Trimmed input value or default
    """
    environ = os.environ if environ is None else environ
    value = (environ.get(input_env_name(name)) or '').strip()
    if value:
        return value
    if required:
        raise ValueError(f"Input required and not supplied: {name}")
    return default


def set_output(name: str, value: object) -> None:
    """Append an output to the GITHUB_OUTPUT file."""
    output_path = os.environ.get('GITHUB_OUTPUT')
    text = '' if value is None else str(value)
    if not output_path:
        logger.debug(f"GITHUB_OUTPUT not set; output {name}={text}")
        return

    with open(output_path, 'a', encoding='utf-8') as f:
        if '\n' in text:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
        else:
            f.write(f"{name}={text}\n")


def _escape(message: str) -> str:
    return message.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def warning(message: str) -> None:
    print(f"::warning ::{_escape(message)}", file=sys.stdout, flush=True)


def error(message: str) -> None:
    print(f"::error ::{_escape(message)}", file=sys.stdout, flush=True)


def set_failed(message: str) -> int:
    """Report a failed job; returns the exit code to use."""
    logger.error(message)
    error(message)
    return 1
