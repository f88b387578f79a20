"""
Presentation Layer: Logger
Gestion des journaux avec Loguru et Rich
"""
from datetime import datetime
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console
from rich.logging import RichHandler

from core.settings import Settings, get_settings
from domain.entities import DiffResult


LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Logger:
    """
    Gestionnaire de logs avec Loguru, rendu console par Rich.
    Peut tenir un journal Markdown des comparaisons dans logs/.
    """

    def __init__(
        self,
        session_name: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
    ):
        self.settings = settings or get_settings()
        self.session_name = session_name or f"session_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.log_file = self.settings.logs_dir / f"{self.session_name}.md"
        self.console = console or Console(stderr=True)
        self.log_level = self._normalize(self.settings.log_level)
        self.journal = self.settings.log_journal
        self.rotation_bytes = 2 * 1024 * 1024  # 2 Mo
        self.retention_count = 5

        self._setup_loguru()

    @staticmethod
    def _normalize(level: str) -> str:
        normalized = str(level).upper()
        return normalized if normalized in LOG_LEVELS else "INFO"

    def _setup_loguru(self) -> None:
        """Configure Loguru avec Rich handler"""
        loguru_logger.remove()  # Enlève le handler par défaut

        loguru_logger.add(
            RichHandler(console=self.console, rich_tracebacks=True, show_path=False),
            format="{message}",
            level=self.log_level,
        )

        # Handler fichier Markdown
        if self.journal:
            self.settings.ensure_directories()
            loguru_logger.add(
                str(self.log_file),
                format="{message}",
                level="DEBUG",
                rotation=self.rotation_bytes,
                retention=self.retention_count,
                encoding="utf-8",
            )

    def set_level(self, level: str) -> None:
        """Met à jour le niveau minimum de log affiché dans la console."""

        if not level:
            return

        self.log_level = self._normalize(level)
        self._setup_loguru()

    def log_info(self, message: str) -> None:
        loguru_logger.info(message)

    def log_error(self, message: str) -> None:
        loguru_logger.error(f"Erreur: {message}")

    def log_diff(self, diff_result: DiffResult) -> None:
        """
        Log un diff : le résumé en INFO, le listing complet en DEBUG.

        Args:
            diff_result: Un objet DiffResult
        """
        loguru_logger.info(diff_result.get_summary())
        loguru_logger.debug(
            "\n### Diff: {} -> {}\n\n```diff\n{}```\n",
            diff_result.source_label,
            diff_result.target_label,
            diff_result.to_unified_diff(),
        )

    def get_log_file_path(self) -> Optional[str]:
        """Retourne le chemin du journal, ou None si le journal est désactivé"""
        return str(self.log_file) if self.journal else None
