"""Module des clés WireGuard."""

from wg_conf_utils.keys.models import KEY_SIZE, WgKey, WgPrivateKey

__all__ = [
    "KEY_SIZE",
    "WgKey",
    "WgPrivateKey",
]
