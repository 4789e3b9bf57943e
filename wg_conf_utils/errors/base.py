"""Interfaces abstraites pour le traitement des erreurs."""

import sys
from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Chaque implémentation concrète choisit où rapporter l'erreur
    (console, fichier de log, ...).
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain:
    """Diffuse chaque erreur à tous les handlers enregistrés, dans l'ordre."""

    def __init__(self) -> None:
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler à ajouter.

        Returns:
            La chaîne elle-même, pour enchaîner les appels.
        """
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Rapporte l'erreur puis termine le programme.

        Args:
            error: L'exception à rapporter.
            exit_code: Code de sortie (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)
