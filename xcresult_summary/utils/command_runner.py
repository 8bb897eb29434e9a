"""
Command execution utilities.
"""

import subprocess
from typing import List

from xcresult_summary.core.logging import get_logger


def run_command(
    cmd: List[str],
    check: bool = True,
    verbosity: int = 0,
) -> subprocess.CompletedProcess:
    """
    Run a command, capturing its output.

    Args:
        cmd: Command to run as list of strings
        check: Whether to raise exception on non-zero exit code
        verbosity: Verbosity level (0=minimal, 1=progress, 2=commands, 3=debug)

    Returns:
        CompletedProcess object with text stdout/stderr

    Raises:
        subprocess.CalledProcessError: If command fails and check=True
        FileNotFoundError: If command not found
    """
    logger = get_logger(__name__)

    if verbosity >= 3:
        logger.debug(f"Running: {' '.join(cmd)}")
    elif verbosity >= 2:
        logger.info(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            check=check,
            capture_output=True,
            text=True,
        )
        if verbosity >= 3 and result.stderr:
            logger.debug(f"stderr: {result.stderr}")
        return result
    except subprocess.CalledProcessError as e:
        logger.error(f"Command failed with exit code {e.returncode}: {' '.join(cmd)}")
        if e.stderr:
            if verbosity >= 3:
                logger.debug(f"stderr: {e.stderr}")
            elif verbosity >= 1:
                logger.info(f"stderr: {e.stderr}")
        raise
    except FileNotFoundError as e:
        logger.error(f"Command not found: {e}")
        raise
