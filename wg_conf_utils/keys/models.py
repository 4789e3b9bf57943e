"""Modèles de données pour les clés WireGuard.

Ce module définit les dataclasses immuables WgKey et WgPrivateKey.
Une clé est une valeur opaque de 32 octets, échangée sous forme de
texte base64 (44 caractères avec padding). Aucune opération
cryptographique n'est effectuée ici : seule la forme est validée.
"""

import base64
import binascii
from dataclasses import dataclass

from wg_conf_utils.errors.exceptions import KeyEncodingError, KeyLengthError

KEY_SIZE = 32


@dataclass(frozen=True)
class WgKey:
    """Clé WireGuard brute.

    Attributes:
        raw: Les 32 octets de la clé.
    """

    raw: bytes

    def __post_init__(self) -> None:
        """Valide la taille de la clé.

        Raises:
            TypeError: Si raw n'est pas de type bytes.
            KeyLengthError: Si la clé ne fait pas 32 octets.
        """
        if not isinstance(self.raw, bytes):
            raise TypeError(
                f"raw doit être de type bytes, reçu : {type(self.raw).__name__}"
            )
        if len(self.raw) != KEY_SIZE:
            raise KeyLengthError(
                f"wrong length: key must be {KEY_SIZE} bytes, "
                f"got {len(self.raw)}"
            )

    @classmethod
    def parse(cls, text: str) -> "WgKey":
        """Décode une clé depuis son texte base64.

        Args:
            text: Clé encodée en base64 standard, padding compris.

        Returns:
            Instance de la clé.

        Raises:
            KeyEncodingError: Si le texte n'est pas du base64 valide.
            KeyLengthError: Si la clé décodée ne fait pas 32 octets.
        """
        try:
            raw = base64.b64decode(text.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError):
            raise KeyEncodingError(
                "invalid encoding: key must be base64"
            ) from None
        return cls(raw)

    def to_base64(self) -> str:
        """Retourne le texte canonique de la clé."""
        return base64.b64encode(self.raw).decode("ascii")

    def __str__(self) -> str:
        return self.to_base64()


@dataclass(frozen=True, repr=False)
class WgPrivateKey(WgKey):
    """Clé privée d'une interface.

    Le repr masque le secret pour qu'il n'apparaisse jamais dans
    les logs ou les traces ; str() retourne le texte canonique.
    """

    def __repr__(self) -> str:
        return "WgPrivateKey(<masked>)"
