"""Tests pour le schéma InterfaceTable et la validation pydantic de FileConfigLoader."""

import json
import tempfile
import unittest
from pathlib import Path

from pydantic import BaseModel, ValidationError

from wg_conf_utils.config import FileConfigLoader, InterfaceTable, validate_with_schema
from wg_conf_utils.dotconf import InterfaceSection


KEY_TEXT = "AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8="


class Descriptor(BaseModel):
    """Fichier de description complet."""

    interface: InterfaceTable


class TestInterfaceTable(unittest.TestCase):
    """Tests du schéma InterfaceTable."""

    def test_integer_port_becomes_text(self):
        """ListenPort = 51820 (entier TOML) devient "51820"."""
        table = InterfaceTable.model_validate({"ListenPort": 51820})
        self.assertEqual(table.listen_port, "51820")

    def test_missing_fields_default_to_empty(self):
        """Les champs absents valent ""."""
        table = InterfaceTable.model_validate({})
        self.assertEqual(table.private_key, "")
        self.assertEqual(table.post_down, "")

    def test_boolean_refused(self):
        """Un booléen n'est pas converti."""
        with self.assertRaises(ValidationError):
            InterfaceTable.model_validate({"ListenPort": True})

    def test_list_refused(self):
        """Une liste n'est pas une valeur scalaire."""
        with self.assertRaises(ValidationError):
            InterfaceTable.model_validate({"Address": ["10.0.0.1/24"]})

    def test_raw_fields_keeps_unknown_keys(self):
        """Les clés inconnues sont transmises sous forme de texte."""
        table = InterfaceTable.model_validate({
            "PrivateKey": KEY_TEXT,
            "Address": "10.0.0.1/24",
            "ListenPort": 51820,
            "MTU": 1420,
        })
        fields = table.raw_fields()
        self.assertEqual(fields["MTU"], "1420")
        self.assertEqual(fields["ListenPort"], "51820")
        self.assertEqual(fields["PostUp"], "")

    def test_raw_fields_feed_section(self):
        """raw_fields() alimente create_from_raw_fields()."""
        table = InterfaceTable.model_validate({
            "PrivateKey": KEY_TEXT,
            "Address": "10.0.0.1/24",
            "ListenPort": 51820,
            "PostUp": "echo up",
        })
        section = InterfaceSection.create_from_raw_fields(table.raw_fields())
        self.assertEqual(section.listen_port, 51820)
        self.assertEqual(section.post_up, "echo up")

    def test_validate_with_schema_rejects_non_model(self):
        """validate_with_schema() refuse une classe qui n'est pas un BaseModel."""
        with self.assertRaises(TypeError):
            validate_with_schema({}, dict)


class TestFileConfigLoaderWithSchema(unittest.TestCase):
    """Tests FileConfigLoader.load() avec schéma pydantic."""

    def setUp(self):
        self.loader = FileConfigLoader()

    def _write_json(self, data: dict) -> str:
        """Écrit un fichier JSON temporaire et retourne le chemin."""
        f = tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", delete=False
        )
        json.dump(data, f)
        f.close()
        self.addCleanup(Path(f.name).unlink, missing_ok=True)
        return f.name

    def _descriptor(self, **overrides) -> dict:
        interface = {
            "PrivateKey": KEY_TEXT,
            "Address": "10.0.0.1/24",
            "ListenPort": 51820,
        }
        interface.update(overrides)
        return {"interface": interface}

    def test_load_without_schema_returns_dict(self):
        """Sans schéma, load() retourne un dict brut."""
        path = self._write_json(self._descriptor())
        result = self.loader.load(path)
        self.assertIsInstance(result, dict)
        self.assertEqual(result["interface"]["ListenPort"], 51820)

    def test_load_with_schema_returns_model(self):
        """Avec schéma, load() retourne une instance du modèle."""
        path = self._write_json(self._descriptor(PostUp="echo up"))
        result = self.loader.load(path, schema=Descriptor)
        self.assertIsInstance(result, Descriptor)
        self.assertEqual(result.interface.listen_port, "51820")
        self.assertEqual(result.interface.post_up, "echo up")

    def test_schema_rejects_missing_table(self):
        """Une table [interface] absente lève ValidationError."""
        path = self._write_json({"peer": {}})
        with self.assertRaises(ValidationError):
            self.loader.load(path, schema=Descriptor)

    def test_invalid_schema_type(self):
        """Un schéma qui n'est pas un BaseModel lève TypeError."""
        path = self._write_json(self._descriptor())
        with self.assertRaises(TypeError):
            self.loader.load(path, schema=dict)


if __name__ == "__main__":
    unittest.main()
