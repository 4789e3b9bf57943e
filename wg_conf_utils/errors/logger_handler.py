"""
    LoggerErrorHandler
"""
from wg_conf_utils.errors.base import ErrorHandler
from wg_conf_utils.errors.exceptions import ValidationFailed, WgConfError
from wg_conf_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler qui enregistre les erreurs via le Logger injecté."""

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = WgConfError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur ; les erreurs de validation restent des warnings.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, ValidationFailed):
            self.logger.log_warning(f"Section invalide : {error.reason}")
        elif isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
