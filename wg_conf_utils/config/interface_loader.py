"""Chargeur de section [Interface] depuis un fichier de description.

Example:
    Fichier TOML attendu:

        [interface]
        PrivateKey = "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk="
        Address = "10.0.0.1/24"
        ListenPort = 51820
        PostUp = "iptables -A FORWARD -i wg0 -j ACCEPT"
        PostDown = "iptables -D FORWARD -i wg0 -j ACCEPT"

    Chargement:

        loader = InterfaceSectionLoader("wg0.toml", logger=FileLogger("wg.log"))
        section = loader.load()
"""

from pathlib import Path

from pydantic import ValidationError

from wg_conf_utils.config.loader import (
    ConfigFileLoader,
    ConfigLoader,
    validate_with_schema,
)
from wg_conf_utils.config.schema import InterfaceTable
from wg_conf_utils.dotconf.interface import InterfaceSection
from wg_conf_utils.errors.exceptions import FileConfigurationError, WgConfError
from wg_conf_utils.logging.base import Logger, NullLogger


class InterfaceSectionLoader(ConfigFileLoader[InterfaceSection]):
    """Construit une InterfaceSection depuis une table TOML ou JSON.

    La table est d'abord validée par le schéma InterfaceTable (forme
    des valeurs), puis passe par InterfaceSection.create_from_raw_fields()
    (validation métier).

    Attributes:
        DEFAULT_SECTION: Nom de la table par défaut ("interface").
    """

    DEFAULT_SECTION: str = "interface"

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None,
        logger: Logger | None = None
    ) -> None:
        """Initialise le loader.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur de configuration injectable.
            logger: Logger des opérations (défaut : aucun).
        """
        super().__init__(config_path, config_loader)
        self.logger = logger or NullLogger()

    def load(self, section: str | None = None) -> InterfaceSection:
        """Charge et valide la section.

        Args:
            section: Nom de la table. Par défaut "interface".

        Returns:
            Section [Interface] validée.

        Raises:
            FileConfigurationError: Si la table est absente ou contient
                une valeur non scalaire.
            InvalidKeyError: Si la clé privée est invalide.
            ValidationFailed: Si un autre champ est invalide.
        """
        table = section or self.DEFAULT_SECTION
        data = self._get_section(table)

        try:
            fields = validate_with_schema(data, InterfaceTable).raw_fields()
        except ValidationError as e:
            locations = ", ".join(
                f"{table}.{'.'.join(str(part) for part in err['loc'])}"
                for err in e.errors()
            )
            raise FileConfigurationError(
                f"Valeur scalaire attendue pour : {locations}"
            ) from e

        try:
            interface = InterfaceSection.create_from_raw_fields(fields, self.logger)
        except WgConfError as e:
            self.logger.log_error(
                f"Section '{table}' de {self.config_path} invalide : "
                f"{type(e).__name__}: {e}"
            )
            raise

        self.logger.log_info(
            f"Section '{table}' chargée depuis {self.config_path} "
            f"(Address = {interface.address}, "
            f"ListenPort = {interface.listen_port})"
        )
        return interface
