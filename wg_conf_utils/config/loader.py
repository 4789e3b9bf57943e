"""Chargement des fichiers de description (TOML, JSON)."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import BaseModel

from wg_conf_utils.errors.exceptions import FileConfigurationError

# Type de l'objet produit par un chargeur de section
T = TypeVar("T")

# Type du modèle pydantic produit par validate_with_schema
M = TypeVar("M", bound=BaseModel)


def validate_with_schema(data: Dict[str, Any], schema: type[M]) -> M:
    """Valide un dict via un modèle pydantic.

    Raises:
        TypeError: Si schema n'est pas un BaseModel.
        pydantic.ValidationError: Si les données ne respectent pas le modèle.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(
            f"Le schéma doit être une sous-classe de "
            f"pydantic.BaseModel, reçu : {schema}"
        )
    return schema.model_validate(data)


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet de substituer l'implémentation réelle par un mock
    dans les tests.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe pydantic BaseModel optionnelle. Si fournie,
                retourne une instance du modèle, sinon un dict brut.

        Returns:
            Dictionnaire de configuration ou instance du schéma
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis un fichier TOML ou JSON.

    Le format est détecté par l'extension.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe pydantic BaseModel optionnelle

        Returns:
            Dictionnaire de configuration ou instance du schéma

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
            TypeError: Si schema n'est pas un BaseModel
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé : {path}"
            )

        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                raw_config = tomllib.load(f)
        elif suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                raw_config = json.load(f)
        else:
            raise ValueError(
                f"Extension non supportée : {suffix}. "
                "Utilisez .toml ou .json"
            )

        if schema is None:
            return raw_config

        return validate_with_schema(raw_config, schema)


class ConfigFileLoader(ABC, Generic[T]):
    """Base des chargeurs qui construisent un objet depuis une table du fichier.

    Attributes:
        _config: Dictionnaire chargé depuis le fichier.
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Charge le fichier de configuration.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable. Si None, utilise
                FileConfigLoader.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
        """
        self.config_path = Path(config_path)
        loader = config_loader or FileConfigLoader()
        self._config: dict[str, Any] = loader.load(config_path)

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def _get_section(self, section: str) -> dict[str, Any]:
        """Extrait une table du fichier de configuration.

        Args:
            section: Nom de la table (ex: "interface").

        Returns:
            Dictionnaire de la table.

        Raises:
            FileConfigurationError: Si la table est absente ou n'est
                pas un dictionnaire.
        """
        if section not in self._config:
            available = list(self._config.keys())
            raise FileConfigurationError(
                f"Section '{section}' non trouvée dans {self.config_path}. "
                f"Sections disponibles : {available}"
            )
        data = self._config[section]
        if not isinstance(data, dict):
            raise FileConfigurationError(
                f"Section '{section}' de {self.config_path} "
                f"n'est pas une table"
            )
        return data

    @abstractmethod
    def load(self, section: str | None = None) -> T:
        """Construit l'objet depuis la table demandée.

        Args:
            section: Nom de la table. Si None, table par défaut du loader.
        """
        pass
