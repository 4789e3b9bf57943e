"""Interface abstraite pour le logging, et son implémentation muette."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface du système de logging injecté dans les composants."""

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass


class NullLogger(Logger):
    """Logger qui ignore tous les messages.

    Utilisé par défaut quand l'appelant n'injecte aucun logger.
    """

    def log_info(self, message: str) -> None:
        pass

    def log_warning(self, message: str) -> None:
        pass

    def log_error(self, message: str) -> None:
        pass
