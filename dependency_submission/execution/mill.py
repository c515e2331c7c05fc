"""Mill launcher resolution.

Prefers a wrapper committed to the workspace (`./mill`, then `./millw`).
Without one, the pinned millw script is downloaded into the workspace and
marked executable. The outcome is always a ProvisionResult; this module
never raises for download or permission failures.
"""

import logging
import stat
from pathlib import Path

import httpx

from dependency_submission.execution.types import ProvisionResult

logger = logging.getLogger(__name__)

MILLW_VERSION = "0.4.11"
MILLW_URL = f"https://raw.githubusercontent.com/lefou/millw/{MILLW_VERSION}/millw"

# Timeout for the wrapper download (seconds)
DOWNLOAD_TIMEOUT = 60

WRAPPER_NAMES: tuple[str, ...] = ("mill", "millw")


def find_wrapper(base_dir: Path) -> Path | None:
    """Return the first wrapper script present in base_dir."""
    for name in WRAPPER_NAMES:
        path = base_dir / name
        if path.is_file():
            return path
    return None


def download_wrapper(base_dir: Path, url: str = MILLW_URL) -> ProvisionResult:
    """Download millw into base_dir and make it executable."""
    target = base_dir / "millw"
    logger.info("No Mill wrapper in %s; downloading %s", base_dir, url)

    try:
        response = httpx.get(url, follow_redirects=True, timeout=DOWNLOAD_TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error("Mill wrapper download failed: %s", exc)
        return ProvisionResult(error=f"download of {url} failed: {exc}")

    try:
        target.write_bytes(response.content)
        mode = target.stat().st_mode
        target.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as exc:
        logger.error("Could not install Mill wrapper at %s: %s", target, exc)
        return ProvisionResult(error=f"could not install {target}: {exc}")

    logger.info("Mill wrapper installed: %s", target)
    return ProvisionResult(wrapper=target)


def provision_mill(base_dir: Path) -> ProvisionResult:
    """Resolve a local wrapper, downloading millw when none is present."""
    base_dir = Path(base_dir)
    wrapper = find_wrapper(base_dir)
    if wrapper is not None:
        logger.info("Using Mill wrapper %s", wrapper)
        return ProvisionResult(wrapper=wrapper)
    return download_wrapper(base_dir)
