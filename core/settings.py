"""
Core Settings
Configuration globale de l'application
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_LOOKAHEAD = 4


class Settings:
    """Paramètres globaux de l'application"""

    def __init__(
        self,
        config_path: Optional[str] = None,
        *,
        project_root: Optional[Path] = None,
    ):
        self.project_root = (project_root or Path.cwd()).resolve()
        self.config_path = Path(config_path) if config_path else self.project_root / "config" / "settings.yaml"
        self.logs_dir = self.project_root / "logs"

        # Alignement
        self.lookahead: int = DEFAULT_LOOKAHEAD

        # Affichage
        self.display_max_lines: int = 200
        self.display_max_width: int = 160

        # Journalisation
        self.log_level: str = "INFO"
        self.log_journal: bool = False

        # Metadata
        self.metadata = {
            "version": "1.0.0",
            "project_name": "linediff"
        }

        self._load_config()
        self._load_env()

    def _load_config(self) -> None:
        """Charge la configuration depuis le fichier YAML"""
        if not self.config_path.exists():
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            # Si erreur, on garde les valeurs par défaut
            return

        if not isinstance(config, dict):
            return

        diff_cfg = self._section(config, 'diff')
        self.lookahead = self._as_lookahead(diff_cfg.get('lookahead'), self.lookahead)

        display_cfg = self._section(config, 'display')
        self.display_max_lines = self._as_positive_int(display_cfg.get('max_lines'), self.display_max_lines)
        self.display_max_width = self._as_positive_int(display_cfg.get('max_width'), self.display_max_width)

        logging_cfg = self._section(config, 'logging')
        self.log_level = str(logging_cfg.get('level', self.log_level)).upper()
        journal = logging_cfg.get('journal', self.log_journal)
        self.log_journal = journal if isinstance(journal, bool) else self.log_journal

    def _load_env(self) -> None:
        """Les variables d'environnement priment sur le fichier YAML"""
        level = os.getenv("LINEDIFF_LOG_LEVEL")
        if level:
            self.log_level = level.upper()
        self.lookahead = self._as_lookahead(os.getenv("LINEDIFF_LOOKAHEAD"), self.lookahead)

    @staticmethod
    def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = config.get(name)
        return section if isinstance(section, dict) else {}

    @staticmethod
    def _as_int(value: Any) -> Optional[int]:
        """Entier YAML, ou chaîne de chiffres venant de l'environnement"""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    @classmethod
    def _as_lookahead(cls, value: Any, default: int) -> int:
        parsed = cls._as_int(value)
        return parsed if parsed is not None and parsed >= 0 else default

    @classmethod
    def _as_positive_int(cls, value: Any, default: int) -> int:
        parsed = cls._as_int(value)
        return parsed if parsed is not None and parsed > 0 else default

    def ensure_directories(self) -> None:
        """Crée le répertoire des journaux s'il n'existe pas"""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


_SETTINGS_CACHE: Dict[str, Settings] = {}


def get_settings(workspace: Path | str | None = None) -> Settings:
    """Fabrique paresseuse de Settings basée sur le workspace."""

    key = str(Path(workspace).resolve()) if workspace else "__default__"
    if key in _SETTINGS_CACHE:
        return _SETTINGS_CACHE[key]

    root = Path(workspace).resolve() if workspace else Path.cwd().resolve()
    settings = Settings(project_root=root)
    _SETTINGS_CACHE[key] = settings
    return settings


def reset_settings_cache() -> None:
    """Vide le cache (utile quand la configuration change sur disque)"""
    _SETTINGS_CACHE.clear()
