"""
    ConsoleErrorHandler pour les erreurs de section
"""
from wg_conf_utils.errors.base import ErrorHandler
from wg_conf_utils.errors.exceptions import (ConfigurationError,
                                             InvalidKeyError,
                                             KeyEncodingError,
                                             KeyLengthError,
                                             ValidationFailed,
                                             WgConfError)


DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    KeyEncodingError: "La clé doit être encodée en base64 (sortie de 'wg genkey').",
    KeyLengthError: "La clé doit représenter exactement 32 octets.",
    InvalidKeyError: "Régénérez la clé avec 'wg genkey'.",
    ValidationFailed: "Corrigez la valeur indiquée dans la section [Interface].",
    ConfigurationError: "Vérifiez votre fichier de description.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler qui affiche les erreurs dans la console.

    Les erreurs du paquet (WgConfError) sont affichées avec une
    suggestion de solution ; les autres sont signalées comme inattendues.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = WgConfError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base des erreurs connues
                             (défaut: WgConfError).
            solutions: Dictionnaire {TypeException: "message solution"}
                       qui complète ou remplace DEFAULT_SOLUTIONS.
        """
        self.base_error_type = base_error_type
        self.solutions = {**DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la solution du type le plus proche dans le MRO."""
        for klass in type(error).__mro__:
            if klass in self.solutions:
                return self.solutions[klass]
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
