"""Plugin module: sbt / Mill plugin coordinates and transient file injection."""

from dependency_submission.plugin.injector import inject
from dependency_submission.plugin.types import (
    MILL_PLUGIN,
    SBT_PLUGIN_FAMILIES,
    PluginDescriptor,
    PluginGeneration,
    TransientPluginFile,
)

__all__ = [
    "inject",
    "MILL_PLUGIN",
    "SBT_PLUGIN_FAMILIES",
    "PluginDescriptor",
    "PluginGeneration",
    "TransientPluginFile",
]
