"""Interface abstraite d'une section de fichier de configuration WireGuard.

Une section représente un bloc [Nom] suivi de lignes "Clé = Valeur".
La découpe d'un fichier complet en sections est faite en amont ;
une section ne lit jamais de fichier.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

RawFields = Mapping[str, str] | Iterable[tuple[str, str]]


class IniSection(ABC):
    """Interface pour une section de fichier de configuration."""

    @staticmethod
    @abstractmethod
    def section_name() -> str:
        """Retourne le nom de la section tel qu'il apparaît dans l'en-tête.

        Returns:
            Nom de la section (ex: "Interface").
        """
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, str]:
        """Convertit la section en dictionnaire clé-valeur canonique.

        Returns:
            Dictionnaire ordonné des paires Clé=Valeur.
        """
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: RawFields) -> "IniSection":
        """Crée une instance validée depuis les champs bruts.

        Args:
            data: Paires Clé=Valeur brutes de la section.

        Returns:
            Instance de la section.
        """
        pass

    def to_ini(self) -> str:
        """Génère le texte canonique de la section.

        L'en-tête est suivi d'une ligne "Clé = Valeur" par champ,
        dans l'ordre de to_dict(), puis d'une ligne vide.

        Returns:
            Texte de la section, terminé par une ligne vide.
        """
        lines = [f"[{self.section_name()}]"]
        lines.extend(f"{key} = {value}" for key, value in self.to_dict().items())
        return "\n".join(lines) + "\n\n"
