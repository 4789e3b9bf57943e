"""Module de gestion des erreurs."""

from wg_conf_utils.errors.base import ErrorHandler, ErrorHandlerChain
from wg_conf_utils.errors.exceptions import (WgConfError,
                                             ValidationFailed,
                                             InvalidKeyError,
                                             KeyEncodingError,
                                             KeyLengthError,
                                             ConfigurationError,
                                             FileConfigurationError)
from wg_conf_utils.errors.console_handler import ConsoleErrorHandler
from wg_conf_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
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
]
