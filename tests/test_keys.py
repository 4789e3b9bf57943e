"""Tests pour les clés WireGuard."""

import dataclasses

import pytest

from wg_conf_utils.errors import (
    InvalidKeyError,
    KeyEncodingError,
    KeyLengthError,
    WgConfError,
)
from wg_conf_utils.keys import KEY_SIZE, WgKey, WgPrivateKey


KEY_TEXT = "AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8="


class TestWgKeyParse:
    """Tests pour WgKey.parse."""

    def test_parse_valid_key(self) -> None:
        """Clé base64 de 32 octets acceptée."""
        key = WgKey.parse(KEY_TEXT)
        assert key.raw == bytes(range(32))
        assert len(key.raw) == KEY_SIZE

    def test_canonical_text(self) -> None:
        """Le texte canonique est le base64 avec padding."""
        key = WgKey.parse(KEY_TEXT)
        assert str(key) == KEY_TEXT
        assert key.to_base64() == KEY_TEXT

    def test_wrong_length_short(self) -> None:
        """31 octets lève KeyLengthError."""
        with pytest.raises(KeyLengthError, match="got 31"):
            WgKey.parse("AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA==")

    def test_wrong_length_long(self) -> None:
        """33 octets lève KeyLengthError."""
        with pytest.raises(KeyLengthError, match="wrong length"):
            WgKey.parse("AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA")

    def test_empty_text(self) -> None:
        """Chaîne vide lève KeyLengthError."""
        with pytest.raises(KeyLengthError, match="got 0"):
            WgKey.parse("")

    def test_invalid_characters(self) -> None:
        """Caractères hors alphabet base64 levent KeyEncodingError."""
        with pytest.raises(KeyEncodingError, match="invalid encoding"):
            WgKey.parse("AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8*")

    def test_missing_padding(self) -> None:
        """Padding absent lève KeyEncodingError."""
        with pytest.raises(KeyEncodingError):
            WgKey.parse(KEY_TEXT.rstrip("="))

    def test_non_ascii(self) -> None:
        """Texte non ASCII lève KeyEncodingError."""
        with pytest.raises(KeyEncodingError):
            WgKey.parse("clé")

    def test_taxonomy(self) -> None:
        """Les erreurs de clé partagent une base commune."""
        assert issubclass(KeyEncodingError, InvalidKeyError)
        assert issubclass(KeyLengthError, InvalidKeyError)
        assert issubclass(InvalidKeyError, WgConfError)


class TestWgKey:
    """Tests pour la dataclass WgKey."""

    def test_direct_construction_checks_length(self) -> None:
        """Construction directe avec une mauvaise taille refusée."""
        with pytest.raises(KeyLengthError):
            WgKey(b"\x00" * 16)

    def test_direct_construction_checks_type(self) -> None:
        """Construction depuis une chaîne refusée."""
        with pytest.raises(TypeError):
            WgKey(KEY_TEXT)

    def test_immutability(self) -> None:
        """La clé est immuable."""
        key = WgKey(bytes(32))
        with pytest.raises(dataclasses.FrozenInstanceError):
            key.raw = bytes(32)

    def test_equality(self) -> None:
        """Égalité sur les octets."""
        assert WgKey.parse(KEY_TEXT) == WgKey(bytes(range(32)))
        assert WgKey.parse(KEY_TEXT) != WgKey(bytes(32))


class TestWgPrivateKey:
    """Tests pour WgPrivateKey."""

    def test_parse_returns_private_key(self) -> None:
        """parse retourne le type de la sous-classe."""
        assert isinstance(WgPrivateKey.parse(KEY_TEXT), WgPrivateKey)

    def test_repr_is_masked(self) -> None:
        """Le repr ne révèle pas la clé."""
        key = WgPrivateKey.parse(KEY_TEXT)
        assert repr(key) == "WgPrivateKey(<masked>)"
        assert str(key) == KEY_TEXT

    def test_not_equal_to_plain_key(self) -> None:
        """Une clé privée n'est pas égale à une WgKey de mêmes octets."""
        assert WgPrivateKey.parse(KEY_TEXT) != WgKey.parse(KEY_TEXT)
