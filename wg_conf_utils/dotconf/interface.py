"""Section [Interface] d'un fichier de configuration WireGuard.

Ce module fournit InterfaceSection, une dataclass immuable dont toute
instance est valide : les invariants sont vérifiés dans __post_init__,
par lequel passent les trois chemins de construction :

- create() : valeurs déjà typées (clé, adresse, port entier) ;
- create_from_raw_values() : cinq chaînes brutes, analysées dans
  l'ordre clé -> adresse -> port ;
- create_from_raw_fields() : dictionnaire (ou paires) Clé=Valeur issu
  du découpage du fichier.

Example:
    >>> section = InterfaceSection.create_from_raw_fields({
    ...     "PrivateKey": "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk=",
    ...     "Address": "10.0.0.1/24",
    ...     "ListenPort": "51820",
    ... })
    >>> print(section.to_ini())
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from wg_conf_utils.dotconf.base import IniSection, RawFields
from wg_conf_utils.errors.exceptions import ValidationFailed
from wg_conf_utils.keys.models import WgPrivateKey
from wg_conf_utils.logging.base import Logger, NullLogger
from wg_conf_utils.network.validators import (
    MAX_PORT,
    InterfaceAddress,
    parse_interface_address,
    parse_port,
)

TAG = "[Interface]"

PRIVATE_KEY = "PrivateKey"
ADDRESS = "Address"
LISTEN_PORT = "ListenPort"
POST_UP = "PostUp"
POST_DOWN = "PostDown"

FIELD_ORDER = (PRIVATE_KEY, ADDRESS, LISTEN_PORT, POST_UP, POST_DOWN)

ADDRESS_HINT = "address must be address with mask (e.g. 10.0.0.1/8)"


@dataclass
class _RawInterfaceFields:
    """Champs bruts en cours de collecte ; un champ absent vaut ""."""

    private_key: str = ""
    address: str = ""
    listen_port: str = ""
    post_up: str = ""
    post_down: str = ""


_ATTRIBUTE_BY_FIELD = {
    PRIVATE_KEY: "private_key",
    ADDRESS: "address",
    LISTEN_PORT: "listen_port",
    POST_UP: "post_up",
    POST_DOWN: "post_down",
}


@dataclass(frozen=True)
class InterfaceSection(IniSection):
    """Section [Interface] validée.

    Attributes:
        private_key: Clé privée de l'interface.
        address: Adresse de l'interface avec son masque.
        listen_port: Port d'écoute UDP, jamais 0.
        post_up: Commande shell exécutée à l'activation (non interprétée).
        post_down: Commande shell exécutée à l'arrêt (non interprétée).
    """

    private_key: WgPrivateKey
    address: InterfaceAddress
    listen_port: int
    post_up: str
    post_down: str

    def __post_init__(self) -> None:
        """Vérifie les invariants de la section.

        Raises:
            TypeError: Si un champ n'a pas le type attendu.
            ValidationFailed: Si le port vaut 0 ou dépasse 65535.
        """
        if not isinstance(self.private_key, WgPrivateKey):
            raise TypeError(
                f"private_key doit être un WgPrivateKey, "
                f"reçu : {type(self.private_key).__name__}"
            )
        if not isinstance(self.address, InterfaceAddress):
            raise TypeError(
                f"address doit être une IPv4Interface ou IPv6Interface, "
                f"reçu : {type(self.address).__name__}"
            )
        for name in ("post_up", "post_down"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} doit être une chaîne")

        port = self.listen_port
        if isinstance(port, bool) or not isinstance(port, int):
            raise TypeError(
                f"listen_port doit être un entier, reçu : {type(port).__name__}"
            )
        if port == 0:
            raise ValidationFailed("port can't be 0")
        if not 0 < port <= MAX_PORT:
            raise ValidationFailed(f"port must be in range 1-{MAX_PORT}")

    @classmethod
    def create(
        cls,
        private_key: WgPrivateKey,
        address: InterfaceAddress,
        listen_port: int,
        post_up: str,
        post_down: str,
    ) -> "InterfaceSection":
        """Crée une section depuis des valeurs déjà typées.

        Args:
            private_key: Clé privée déjà analysée.
            address: Adresse d'interface déjà analysée.
            listen_port: Port d'écoute.
            post_up: Commande d'activation.
            post_down: Commande d'arrêt.

        Returns:
            Section valide.

        Raises:
            ValidationFailed: Si le port vaut 0 ("port can't be 0").
        """
        return cls(
            private_key=private_key,
            address=address,
            listen_port=listen_port,
            post_up=post_up,
            post_down=post_down,
        )

    @classmethod
    def create_from_raw_values(
        cls,
        private_key: str,
        address: str,
        listen_port: str,
        post_up: str,
        post_down: str,
    ) -> "InterfaceSection":
        """Crée une section depuis cinq chaînes brutes.

        Les champs sont analysés dans l'ordre clé, adresse, port ; le
        premier champ invalide détermine l'erreur.

        Args:
            private_key: Clé privée en base64.
            address: Adresse avec masque (ex: "10.0.0.1/8").
            listen_port: Port en décimal.
            post_up: Commande d'activation, conservée telle quelle.
            post_down: Commande d'arrêt, conservée telle quelle.

        Returns:
            Section valide.

        Raises:
            InvalidKeyError: Erreur de l'analyseur de clé, non enveloppée.
            ValidationFailed: Adresse, port invalides ou port nul.
        """
        key = WgPrivateKey.parse(private_key)

        try:
            parsed_address = parse_interface_address(address)
        except ValueError:
            raise ValidationFailed(ADDRESS_HINT) from None

        try:
            port = parse_port(listen_port)
        except ValueError:
            raise ValidationFailed("invalid port raw value") from None

        return cls.create(key, parsed_address, port, post_up, post_down)

    @classmethod
    def create_from_raw_fields(
        cls,
        fields: RawFields,
        logger: Optional[Logger] = None,
    ) -> "InterfaceSection":
        """Crée une section depuis les paires Clé=Valeur du fichier.

        Les noms de champs sont sensibles à la casse. Les clés inconnues
        sont ignorées, les clés absentes valent "". Si une clé apparaît
        plusieurs fois (forme paires), la dernière valeur l'emporte.

        Args:
            fields: Dictionnaire ou itérable de paires (clé, valeur).
            logger: Logger optionnel recevant les clés ignorées.

        Returns:
            Section valide.

        Raises:
            InvalidKeyError: Si la clé privée est invalide.
            ValidationFailed: Si un autre champ est invalide.
        """
        logger = logger or NullLogger()
        items = fields.items() if isinstance(fields, Mapping) else fields

        raw = _RawInterfaceFields()
        for key, value in items:
            attribute = _ATTRIBUTE_BY_FIELD.get(key)
            if attribute is None:
                logger.log_info(f"{TAG} champ ignoré : {key}")
                continue
            setattr(raw, attribute, value)

        return cls.create_from_raw_values(
            raw.private_key,
            raw.address,
            raw.listen_port,
            raw.post_up,
            raw.post_down,
        )

    @staticmethod
    def section_name() -> str:
        return "Interface"

    def to_dict(self) -> dict[str, str]:
        """Retourne le texte canonique de chaque champ, dans l'ordre du format."""
        return {
            PRIVATE_KEY: str(self.private_key),
            ADDRESS: str(self.address),
            LISTEN_PORT: str(self.listen_port),
            POST_UP: self.post_up,
            POST_DOWN: self.post_down,
        }

    @classmethod
    def from_dict(cls, data: RawFields) -> "InterfaceSection":
        return cls.create_from_raw_fields(data)


def render(section: InterfaceSection) -> str:
    """Génère le bloc [Interface] canonique d'une section.

    Args:
        section: Section valide.

    Returns:
        En-tête, cinq lignes "Clé = Valeur" et une ligne vide finale.
    """
    return section.to_ini()
