"""Schémas pydantic des fichiers de description.

Un fichier de description TOML ou JSON décrit une interface dans une
table dont les clés sont les noms de champs du format WireGuard :

    [interface]
    PrivateKey = "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk="
    Address = "10.0.0.1/24"
    ListenPort = 51820

Le schéma ne valide que la forme (valeurs scalaires) ; la validation
métier reste celle d'InterfaceSection.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wg_conf_utils.dotconf.interface import (
    ADDRESS,
    LISTEN_PORT,
    POST_DOWN,
    POST_UP,
    PRIVATE_KEY,
)


class InterfaceTable(BaseModel):
    """Table [interface] d'un fichier de description.

    Les champs absents valent "", comme dans le chemin dictionnaire
    d'InterfaceSection. Les clés inconnues sont conservées dans
    model_extra et transmises telles quelles.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    private_key: str = Field(default="", alias=PRIVATE_KEY)
    address: str = Field(default="", alias=ADDRESS)
    listen_port: str = Field(default="", alias=LISTEN_PORT)
    post_up: str = Field(default="", alias=POST_UP)
    post_down: str = Field(default="", alias=POST_DOWN)

    @field_validator(
        "private_key", "address", "listen_port", "post_up", "post_down",
        mode="before",
    )
    @classmethod
    def scalar_to_text(cls, value: Any) -> Any:
        """Convertit les entiers TOML/JSON en texte, refuse les booléens."""
        if isinstance(value, bool):
            raise ValueError("valeur booléenne non acceptée")
        if isinstance(value, int):
            return str(value)
        return value

    def raw_fields(self) -> dict[str, str]:
        """Retourne les paires Clé=Valeur brutes, clés inconnues comprises.

        Returns:
            Dictionnaire prêt pour InterfaceSection.create_from_raw_fields().
        """
        fields = {
            key: str(value) for key, value in (self.model_extra or {}).items()
        }
        fields.update({
            PRIVATE_KEY: self.private_key,
            ADDRESS: self.address,
            LISTEN_PORT: self.listen_port,
            POST_UP: self.post_up,
            POST_DOWN: self.post_down,
        })
        return fields
