"""Module DotConf : sections typées d'un fichier de configuration WireGuard.

Ce module convertit les champs bruts d'une section (paires Clé=Valeur
déjà extraites du fichier) en une dataclass immuable et validée, et
régénère le texte canonique de la section.

Classes principales:
    - IniSection: Interface abstraite pour une section
    - InterfaceSection: Section [Interface] validée

Fonctions utilitaires:
    - render: Texte canonique d'une section [Interface]

Example:
    >>> from wg_conf_utils.dotconf import InterfaceSection, render
    >>> section = InterfaceSection.create_from_raw_values(
    ...     "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk=",
    ...     "10.0.0.1/24",
    ...     "51820",
    ...     "iptables -A FORWARD -i wg0 -j ACCEPT",
    ...     "iptables -D FORWARD -i wg0 -j ACCEPT",
    ... )
    >>> text = render(section)
"""

from wg_conf_utils.dotconf.base import IniSection, RawFields
from wg_conf_utils.dotconf.interface import (
    ADDRESS,
    ADDRESS_HINT,
    FIELD_ORDER,
    LISTEN_PORT,
    POST_DOWN,
    POST_UP,
    PRIVATE_KEY,
    TAG,
    InterfaceSection,
    render,
)

__all__ = [
    # Interfaces abstraites
    "IniSection",
    "RawFields",
    # Implémentations
    "InterfaceSection",
    "render",
    # Format
    "TAG",
    "PRIVATE_KEY",
    "ADDRESS",
    "LISTEN_PORT",
    "POST_UP",
    "POST_DOWN",
    "FIELD_ORDER",
    "ADDRESS_HINT",
]
