"""Module réseau : analyse des adresses et ports d'interface."""

from wg_conf_utils.network.validators import (
    MAX_PORT,
    InterfaceAddress,
    parse_interface_address,
    parse_port,
)

__all__ = [
    "MAX_PORT",
    "InterfaceAddress",
    "parse_interface_address",
    "parse_port",
]
