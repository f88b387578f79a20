"""
Data Layer: Diff Engine
Alignement ligne à ligne de deux documents texte
"""
from typing import List, Optional, Sequence

from loguru import logger

from domain.entities import DiffResult, DiffLine
from core.file_manager import file_manager
from core.settings import DEFAULT_LOOKAHEAD, get_settings


class DiffEngineError(Exception):
    """Exception pour les erreurs de diff engine"""
    pass


def split_lines(document: str) -> List[str]:
    """
    Découpe un document en lignes sur "\\n".

    Découpage simple : un saut de ligne final produit une dernière ligne
    vide, et un document vide contient une seule ligne vide.
    """
    return document.split("\n")


class LineAligner:
    """
    Aligneur glouton à fenêtre bornée.

    Quand les deux lignes courantes diffèrent, on cherche la ligne du
    premier document dans les `lookahead` lignes suivantes du second
    (insertions), puis la ligne du second dans les `lookahead` lignes
    suivantes du premier (suppressions). Sans correspondance, la paire
    est émise comme une substitution (REMOVED puis ADDED).

    Ce n'est pas un LCS optimal : un bloc déplacé au-delà de la fenêtre
    donne un diff non minimal.
    """

    def __init__(self, lookahead: int = DEFAULT_LOOKAHEAD):
        if isinstance(lookahead, bool) or not isinstance(lookahead, int) or lookahead < 0:
            raise DiffEngineError(f"lookahead must be a non-negative integer, got {lookahead!r}")
        self.lookahead = lookahead

    def align(self, document1: str, document2: str) -> DiffResult:
        return self.align_lines(split_lines(document1), split_lines(document2))

    def align_lines(
        self,
        lines1: Sequence[str],
        lines2: Sequence[str],
        result: Optional[DiffResult] = None,
    ) -> DiffResult:
        """
        Aligne deux séquences de lignes.

        Args:
            lines1: Les lignes du premier document
            lines2: Les lignes du second document
            result: DiffResult à remplir (un nouveau par défaut)

        Returns:
            Le DiffResult contenant toutes les lignes classifiées
        """
        result = result if result is not None else DiffResult()
        emit = result.add_diff_line
        len1, len2 = len(lines1), len(lines2)
        i = j = 0
        line_num1 = line_num2 = 1

        while i < len1 or j < len2:
            if i >= len1:
                emit(DiffLine.added(lines2[j], line_num2))
                line_num2 += 1
                j += 1
            elif j >= len2:
                emit(DiffLine.removed(lines1[i], line_num1))
                line_num1 += 1
                i += 1
            elif lines1[i] == lines2[j]:
                emit(DiffLine.unchanged(lines1[i], line_num1, line_num2))
                line_num1 += 1
                line_num2 += 1
                i += 1
                j += 1
            else:
                k = self._find_ahead(lines1[i], lines2, j)
                if k is not None:
                    for m in range(j, k):
                        emit(DiffLine.added(lines2[m], line_num2))
                        line_num2 += 1
                    emit(DiffLine.unchanged(lines1[i], line_num1, line_num2))
                    line_num1 += 1
                    line_num2 += 1
                    i += 1
                    j = k + 1
                    continue

                k = self._find_ahead(lines2[j], lines1, i)
                if k is not None:
                    for m in range(i, k):
                        emit(DiffLine.removed(lines1[m], line_num1))
                        line_num1 += 1
                    emit(DiffLine.unchanged(lines2[j], line_num1, line_num2))
                    line_num1 += 1
                    line_num2 += 1
                    i = k + 1
                    j += 1
                    continue

                emit(DiffLine.removed(lines1[i], line_num1))
                emit(DiffLine.added(lines2[j], line_num2))
                line_num1 += 1
                line_num2 += 1
                i += 1
                j += 1

        return result

    def _find_ahead(self, needle: str, lines: Sequence[str], cursor: int) -> Optional[int]:
        """Première position k dans ]cursor, cursor + lookahead] où lines[k] == needle"""
        end = min(cursor + self.lookahead + 1, len(lines))
        for k in range(cursor + 1, end):
            if lines[k] == needle:
                return k
        return None


def align(document1: str, document2: str, lookahead: int = DEFAULT_LOOKAHEAD) -> DiffResult:
    """
    Compare deux documents et retourne le diff classifié.

    Fonction pure : aucun état n'est conservé entre deux appels.
    """
    return LineAligner(lookahead).align(document1, document2)


class DiffEngine:
    """
    Service de comparaison utilisé par la couche de présentation.
    """

    def __init__(self, lookahead: Optional[int] = None):
        self.lookahead = lookahead

    def _aligner(self, lookahead: Optional[int]) -> LineAligner:
        if lookahead is None:
            lookahead = self.lookahead
        if lookahead is None:
            lookahead = get_settings().lookahead
        return LineAligner(lookahead)

    def compute_diff(
        self,
        old_content: str,
        new_content: str,
        source_label: str = "a",
        target_label: str = "b",
        lookahead: Optional[int] = None,
    ) -> DiffResult:
        """
        Calcule le diff entre deux documents.

        Args:
            old_content: Le premier document
            new_content: Le second document
            source_label: Le nom affiché du premier document
            target_label: Le nom affiché du second document
            lookahead: Taille de la fenêtre (valeur configurée par défaut)

        Returns:
            Un DiffResult contenant les lignes classifiées
        """
        aligner = self._aligner(lookahead)
        lines1 = split_lines(old_content)
        lines2 = split_lines(new_content)
        result = aligner.align_lines(
            lines1,
            lines2,
            DiffResult(source_label=source_label, target_label=target_label),
        )
        logger.debug(
            "Aligned {} ({} lines) with {} ({} lines), lookahead={}: {}",
            source_label, len(lines1), target_label, len(lines2), aligner.lookahead, result.stats,
        )
        return result

    def compute_file_diff(
        self,
        file_path1: str,
        file_path2: str,
        lookahead: Optional[int] = None,
    ) -> DiffResult:
        """
        Calcule le diff entre deux fichiers texte.

        Raises:
            FileManagerError: Si l'un des fichiers ne peut pas être lu
        """
        old_content = file_manager.read_file(file_path1)
        new_content = file_manager.read_file(file_path2)
        return self.compute_diff(old_content, new_content, file_path1, file_path2, lookahead)


# Instance globale du moteur de diff
diff_engine = DiffEngine()
