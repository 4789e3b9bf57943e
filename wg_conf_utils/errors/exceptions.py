"""
Exceptions du codec de configuration WireGuard.

Toutes les erreurs du paquet héritent de WgConfError pour s'intégrer
dans la chaîne d'error handlers (ConsoleErrorHandler, LoggerErrorHandler).
"""


class WgConfError(Exception):
    """Exception de base pour tout le paquet."""
    pass


class ValidationFailed(WgConfError):
    """Levée quand une valeur de section ne respecte pas ses invariants.

    Attributes:
        reason: Message lisible destiné à l'utilisateur.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidKeyError(WgConfError):
    """Exception de base pour les clés mal formées."""
    pass


class KeyEncodingError(InvalidKeyError):
    """Levée quand le texte de la clé n'est pas du base64 valide."""
    pass


class KeyLengthError(InvalidKeyError):
    """Levée quand la clé décodée n'a pas la taille attendue."""
    pass


class ConfigurationError(WgConfError):
    """Exception de base pour les fichiers de description."""
    pass


class FileConfigurationError(ConfigurationError):
    """Levée quand le contenu d'un fichier de description est inexploitable."""
    pass
