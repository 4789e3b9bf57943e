"""Module de configuration."""

from wg_conf_utils.config.loader import (
    ConfigFileLoader,
    ConfigLoader,
    FileConfigLoader,
    validate_with_schema,
)
from wg_conf_utils.config.schema import InterfaceTable
from wg_conf_utils.config.interface_loader import InterfaceSectionLoader

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "ConfigFileLoader",
    "validate_with_schema",
    "InterfaceTable",
    "InterfaceSectionLoader",
]
