"""
Domain Entity: DiffResult
Représente le résultat d'une comparaison ligne à ligne entre deux documents
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Iterable
from enum import Enum


class DiffType(Enum):
    """Classification d'une ligne"""
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffLine:
    """
    Représente une ligne classifiée du diff.

    source_line_number n'existe que pour REMOVED et UNCHANGED,
    target_line_number que pour ADDED et UNCHANGED (numérotation 1-based).
    """
    diff_type: DiffType
    content: str
    source_line_number: Optional[int] = None
    target_line_number: Optional[int] = None

    @classmethod
    def added(cls, content: str, target_line_number: int) -> "DiffLine":
        return cls(DiffType.ADDED, content, target_line_number=target_line_number)

    @classmethod
    def removed(cls, content: str, source_line_number: int) -> "DiffLine":
        return cls(DiffType.REMOVED, content, source_line_number=source_line_number)

    @classmethod
    def unchanged(cls, content: str, source_line_number: int, target_line_number: int) -> "DiffLine":
        return cls(DiffType.UNCHANGED, content, source_line_number, target_line_number)

    @property
    def prefix(self) -> str:
        """Préfixe de la ligne au format unifié"""
        if self.diff_type == DiffType.ADDED:
            return "+"
        elif self.diff_type == DiffType.REMOVED:
            return "-"
        return " "

    def to_dict(self) -> Dict[str, Any]:
        """Convertit la ligne en dictionnaire"""
        return {
            "diff_type": self.diff_type.value,
            "content": self.content,
            "source_line_number": self.source_line_number,
            "target_line_number": self.target_line_number,
        }


@dataclass(frozen=True)
class DiffStats:
    """Compteurs par classification"""
    added: int = 0
    removed: int = 0
    unchanged: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[DiffLine]) -> "DiffStats":
        counts = {diff_type: 0 for diff_type in DiffType}
        for line in lines:
            counts[line.diff_type] += 1
        return cls(
            added=counts[DiffType.ADDED],
            removed=counts[DiffType.REMOVED],
            unchanged=counts[DiffType.UNCHANGED],
        )

    @property
    def total(self) -> int:
        return self.added + self.removed + self.unchanged

    @property
    def changes(self) -> int:
        return self.added + self.removed

    def __str__(self) -> str:
        return f"+{self.added} -{self.removed} ={self.unchanged}"

    def to_dict(self) -> Dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "unchanged": self.unchanged,
        }


@dataclass
class DiffResult:
    """
    Représente le résultat complet d'une comparaison entre deux documents.

    L'ordre des lignes est un entrelacement valide des deux documents :
    chaque ligne du premier apparaît une fois (REMOVED ou UNCHANGED),
    chaque ligne du second une fois (ADDED ou UNCHANGED).
    Les compteurs sont toujours dérivés des lignes.
    """
    source_label: str = "a"
    target_label: str = "b"
    diff_lines: List[DiffLine] = field(default_factory=list)

    def add_diff_line(self, line: DiffLine) -> None:
        """Ajoute une ligne classifiée"""
        self.diff_lines.append(line)

    @property
    def stats(self) -> DiffStats:
        return DiffStats.from_lines(self.diff_lines)

    @property
    def added_lines(self) -> int:
        return self.stats.added

    @property
    def removed_lines(self) -> int:
        return self.stats.removed

    @property
    def unchanged_lines(self) -> int:
        return self.stats.unchanged

    def has_changes(self) -> bool:
        return any(line.diff_type != DiffType.UNCHANGED for line in self.diff_lines)

    def source_lines(self) -> List[str]:
        """Relit les lignes du premier document dans l'ordre"""
        return [line.content for line in self.diff_lines if line.diff_type != DiffType.ADDED]

    def target_lines(self) -> List[str]:
        """Relit les lignes du second document dans l'ordre"""
        return [line.content for line in self.diff_lines if line.diff_type != DiffType.REMOVED]

    def get_summary(self) -> str:
        """Retourne un résumé du diff"""
        label = f"{self.source_label} -> {self.target_label}"
        if not self.has_changes():
            return f"{label}: No changes"
        return f"{label}: {self.stats}"

    def to_unified_diff(self) -> str:
        """
        Génère un listing complet au format unifié.

        Toutes les lignes sont listées, sans regroupement en hunks.
        """
        lines = [f"--- {self.source_label}", f"+++ {self.target_label}"]
        for diff_line in self.diff_lines:
            lines.append(f"{diff_line.prefix}{diff_line.content}")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        """Convertit le résultat en dictionnaire"""
        return {
            "source_label": self.source_label,
            "target_label": self.target_label,
            "diff_lines": [line.to_dict() for line in self.diff_lines],
            "stats": self.stats.to_dict(),
        }
