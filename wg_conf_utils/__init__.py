"""
WG Conf Utils - Codec typé des sections de configuration WireGuard.

Modules disponibles:
- dotconf: Sections typées ([Interface]) et rendu canonique
- keys: Clés WireGuard (validation de forme, base64)
- network: Analyse des adresses d'interface et des ports
- errors: Exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
- config: Chargement de sections depuis TOML/JSON
"""

__version__ = "1.0.0"

from wg_conf_utils.logging import Logger, NullLogger, FileLogger
from wg_conf_utils.errors import (
    WgConfError,
    ValidationFailed,
    InvalidKeyError,
    KeyEncodingError,
    KeyLengthError,
    ConfigurationError,
    FileConfigurationError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from wg_conf_utils.keys import WgKey, WgPrivateKey
from wg_conf_utils.network import parse_interface_address, parse_port
from wg_conf_utils.dotconf import (
    IniSection,
    InterfaceSection,
    render,
)
from wg_conf_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    ConfigFileLoader,
    InterfaceSectionLoader,
    InterfaceTable,
)

__all__ = [
    # Logging
    "Logger",
    "NullLogger",
    "FileLogger",
    # Erreurs
    "WgConfError",
    "ValidationFailed",
    "InvalidKeyError",
    "KeyEncodingError",
    "KeyLengthError",
    "ConfigurationError",
    "FileConfigurationError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Clés
    "WgKey",
    "WgPrivateKey",
    # Réseau
    "parse_interface_address",
    "parse_port",
    # DotConf
    "IniSection",
    "InterfaceSection",
    "render",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "ConfigFileLoader",
    "InterfaceSectionLoader",
    "InterfaceTable",
]
