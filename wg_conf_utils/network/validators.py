"""Fonctions d'analyse pour les données réseau d'une interface.

Ce module fournit les analyseurs de l'adresse d'interface (adresse
avec masque) et du port d'écoute. Ils lèvent ValueError avec le
détail natif ; la traduction en message utilisateur est faite par
la section.
"""

import ipaddress
import re

InterfaceAddress = ipaddress.IPv4Interface | ipaddress.IPv6Interface

MAX_PORT = 65535


def parse_interface_address(raw: str) -> InterfaceAddress:
    """Analyse une adresse d'interface en notation CIDR.

    Les bits d'hôte sont conservés : "10.0.0.1/24" reste "10.0.0.1/24".

    Args:
        raw: Adresse avec longueur de préfixe (ex: "10.0.0.1/8").

    Returns:
        IPv4Interface ou IPv6Interface.

    Raises:
        ValueError: Si la longueur de préfixe manque ou si l'adresse
            ou le préfixe est invalide.
    """
    address, sep, prefix = raw.partition("/")
    if not sep or not address or not prefix.isdigit():
        raise ValueError(f"Adresse avec masque attendue : {raw!r}")
    return ipaddress.ip_interface(raw)


def parse_port(raw: str) -> int:
    """Analyse un port en entier non signé sur 16 bits.

    Seuls les chiffres ASCII sont acceptés, précédés d'un '+'
    optionnel (ni '-', ni espace, ni séparateur '_'). Zéro est
    accepté ici.

    Args:
        raw: Texte du port.

    Returns:
        Le port, entre 0 et 65535.

    Raises:
        ValueError: Si le texte n'est pas un entier 16 bits.
    """
    if not re.fullmatch(r"\+?[0-9]+", raw):
        raise ValueError(f"Port invalide : {raw!r}")
    port = int(raw)
    if port > MAX_PORT:
        raise ValueError(
            f"Port hors plage (0-{MAX_PORT}) : {port}"
        )
    return port
