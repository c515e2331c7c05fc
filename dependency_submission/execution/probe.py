"""Command probe: is an executable resolvable on the search path?

Uses the platform's own lookup command (`which`, or `where.exe` on
Windows) so the answer matches what the runner's shell would resolve.
"""

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 30


def probe_command() -> str:
    return "where.exe" if sys.platform == "win32" else "which"


def command_exists(cmd: str) -> bool:
    """Return True when `cmd` resolves on PATH.

    A missing probe executable counts as "not found".
    """
    try:
        result = subprocess.run(
            [probe_command(), cmd],
            capture_output=True,
            text=True,
            timeout=PROBE_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.warning("Could not probe for %s: %s", cmd, exc)
        return False

    found = result.returncode == 0
    logger.debug("Probe %s: %s", cmd, result.stdout.strip() if found else "not found")
    return found
