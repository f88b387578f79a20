"""
Presentation Layer: UI Diff View
Affichage des diffs avec Rich
"""
from typing import Optional

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from domain.entities import DiffResult, DiffLine, DiffType


STYLES = {
    DiffType.ADDED: "green",
    DiffType.REMOVED: "red",
    DiffType.UNCHANGED: "grey70",
}


class UIDiffView:
    """
    Gestionnaire d'affichage des diffs avec Rich.
    """

    def __init__(self, console: Optional[Console] = None, max_width: int = 160):
        self.console = console or Console()
        self.max_width = max_width

    def render_stats(self, diff_result: DiffResult) -> Text:
        """Les trois compteurs : ajoutées, supprimées, inchangées"""
        stats = diff_result.stats
        badges = Text()
        badges.append(f" +{stats.added} ", style="bold green")
        badges.append(" ")
        badges.append(f" -{stats.removed} ", style="bold red")
        badges.append(" ")
        badges.append(f" ={stats.unchanged} ", style="bold grey70")
        return badges

    def _row(self, diff_line: DiffLine):
        style = STYLES[diff_line.diff_type]
        content = diff_line.content
        if len(content) > self.max_width:
            content = content[:self.max_width] + "…"
        return (
            str(diff_line.source_line_number or "-"),
            str(diff_line.target_line_number or "-"),
            Text(diff_line.prefix, style=style),
            Text(content, style=style),
        )

    def render_table(self, diff_result: DiffResult, max_lines: Optional[int] = None) -> Table:
        table = Table(show_header=True, header_style="bold magenta", box=None, pad_edge=False)
        table.add_column("A", style="dim", justify="right")
        table.add_column("B", style="dim", justify="right")
        table.add_column("", width=1)
        table.add_column("Contenu", overflow="fold")

        lines = diff_result.diff_lines if max_lines is None else diff_result.diff_lines[:max_lines]
        for diff_line in lines:
            table.add_row(*self._row(diff_line))
        return table

    def display_diff(self, diff_result: DiffResult, max_lines: Optional[int] = None) -> None:
        """
        Affiche un diff de manière élégante.

        Args:
            diff_result: Le résultat du diff à afficher
            max_lines: Nombre maximum de lignes affichées (toutes si None)
        """
        parts = [self.render_stats(diff_result), Text(""), self.render_table(diff_result, max_lines)]

        hidden = len(diff_result.diff_lines) - max_lines if max_lines is not None else 0
        if hidden > 0:
            parts.append(Text(f"... et {hidden} autres lignes (--all pour tout afficher)", style="dim"))

        title = f"[bold]Diff: {escape(diff_result.source_label)} -> {escape(diff_result.target_label)}[/bold]"
        self.console.print(Panel(Group(*parts), title=title, border_style="cyan"))
