"""
GitHub Actions host integration: inputs, outputs, step summary and failure signalling.
"""

import os
import sys
import uuid
from pathlib import Path
from typing import Optional, Dict, Union

from xcresult_summary.core.errors import ConfigurationError
from xcresult_summary.core.logging import get_logger

OutputValue = Union[str, int, float, bool]


def get_input(name: str, required: bool = False) -> str:
    """
    Read an action input from the environment.

    The runner exposes ``with:`` values as ``INPUT_<NAME>`` with the name
    upper-cased and spaces replaced by underscores (hyphens are kept).
    """
    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def _format_output(name: str, value: OutputValue) -> str:
    text = str(value).lower() if isinstance(value, bool) else str(value)
    if "\n" not in text:
        return f"{name}={text}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{text}\n{delimiter}\n"


class ActionsHost:
    """Writes outputs and the job summary the way the Actions runner expects."""

    def __init__(self, output_file: Optional[Path] = None, summary_file: Optional[Path] = None):
        self.output_file = output_file
        self.summary_file = summary_file
        self.outputs: Dict[str, str] = {}
        self.failed = False
        self.logger = get_logger(__name__)

    def set_output(self, name: str, value: OutputValue) -> None:
        """Record an output; appended to $GITHUB_OUTPUT when available."""
        self.outputs[name] = str(value)
        if self.output_file is None:
            self.logger.info(f"output {name}={value}")
            return
        with open(self.output_file, "a", encoding="utf-8") as f:
            f.write(_format_output(name, value))

    def write_summary(self, markdown: str) -> None:
        """Append a Markdown block to the job summary, or print it without one."""
        if self.summary_file is None:
            sys.stdout.write(markdown)
            if not markdown.endswith("\n"):
                sys.stdout.write("\n")
            return
        with open(self.summary_file, "a", encoding="utf-8") as f:
            f.write(markdown)

    def set_failed(self, message: str) -> None:
        """Emit an error annotation and mark the run as failed."""
        self.failed = True
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        sys.stdout.write(f"::error::{escaped}\n")
        self.logger.error(message)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
