"""Plugin injector: drops a uniquely named `.sbt` file into `project/`.

sbt loads every `project/*.sbt` file on startup, so the next sbt invocation
picks up the plugin without touching the user's build. The file name carries
a uuid4 token so concurrent or repeated runs never collide, and the file is
opened in exclusive-create mode so an existing file is never overwritten.
"""

import logging
import uuid

from dependency_submission.detector.types import Workspace
from dependency_submission.errors import InvalidWorkspace, PluginWriteError
from dependency_submission.plugin.types import PluginDescriptor, TransientPluginFile

logger = logging.getLogger(__name__)

PLUGIN_FILE_EXTENSION = "sbt"


def plugin_file_name(prefix: str) -> str:
    """Return a fresh `<prefix>-<uuid>.sbt` name."""
    return f"{prefix}-{uuid.uuid4()}.{PLUGIN_FILE_EXTENSION}"


def inject(
    workspace: Workspace,
    descriptor: PluginDescriptor,
    prefix: str,
) -> TransientPluginFile:
    """Write the rendered plugin declaration into the workspace.

    Raises:
        InvalidWorkspace: `<base>/project` does not exist. Nothing is written.
        PluginWriteError: the file could not be created.
    """
    project_dir = workspace.project_dir
    if not project_dir.is_dir():
        raise InvalidWorkspace(
            f"{workspace.base_dir} is not a valid sbt project: "
            f"missing folder '{project_dir}'."
        )

    path = project_dir / plugin_file_name(prefix)
    content = descriptor.rendered_declaration
    try:
        with path.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as exc:
        raise PluginWriteError(f"Failed to write plugin file {path}: {exc}") from exc

    logger.info("Plugin file written: %s (%s)", path, content)
    return TransientPluginFile(path=path, content=content)
