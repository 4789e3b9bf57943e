"""Logger concret écrivant dans un fichier, avec sortie console optionnelle."""

import logging
from pathlib import Path
from typing import Any, Optional

from wg_conf_utils.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier.

    Caractéristiques:
    - Un logger stdlib par fichier (pas de handlers dupliqués)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque message
    - Pas de propagation vers le logger racine
    """

    def __init__(
        self,
        log_file: str | Path,
        config: Optional[dict[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Dictionnaire optionnel {"logging": {"level", "format"}}
            console_output: Dupliquer les messages sur la console
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        level_name, log_format = self._read_settings(config)
        level = getattr(logging, level_name.upper(), logging.INFO)

        self.logger = logging.getLogger(f"wg_conf_utils.{self.log_file}")
        self.logger.setLevel(level)

        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)

        self.handlers = list(self.logger.handlers)
        self.logger.propagate = False

    @staticmethod
    def _read_settings(config: Optional[dict[str, Any]]) -> tuple[str, str]:
        """Extrait niveau et format de la section [logging]."""
        logging_cfg = (config or {}).get("logging", {})
        return (
            logging_cfg.get("level", "INFO"),
            logging_cfg.get("format", DEFAULT_FORMAT),
        )

    def _flush(self) -> None:
        for handler in self.handlers:
            handler.flush()

    def log_info(self, message: str) -> None:
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        self.logger.error(message)
        self._flush()
