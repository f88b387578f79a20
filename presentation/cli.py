"""
Presentation Layer: CLI
Interface en ligne de commande principale
"""
import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from domain.entities import DiffResult
from data.diff_engine import diff_engine, DiffEngineError
from data.samples import DEMO_SOURCE, DEMO_TARGET
from core.file_manager import file_manager, FileManagerError
import core.settings as settings_module
from presentation.logger import Logger
from presentation.ui_diff_view import UIDiffView


app = typer.Typer(help="linediff - Comparaison ligne à ligne de deux documents texte")
console = Console()


def init_app(workspace: Optional[Path] = None):
    """Initialise l'application avec les ressources nécessaires"""
    return settings_module.get_settings(workspace)


def _report(
    diff_result: DiffResult,
    *,
    as_json: bool,
    output: Optional[Path],
    show_all: bool,
    logger: Logger,
) -> None:
    active_settings = init_app()
    logger.log_diff(diff_result)
    if logger.get_log_file_path():
        logger.log_info(f"Journal: {logger.get_log_file_path()}")

    if output is not None:
        try:
            file_manager.write_file(str(output), diff_result.to_unified_diff())
        except FileManagerError as e:
            logger.log_error(str(e))
            console.print(f"[red]Error writing output: {escape(str(e))}[/red]")
            sys.exit(1)
        logger.log_info(f"Diff written to: {output}")

    if as_json:
        typer.echo(json.dumps(diff_result.to_dict(), indent=2, ensure_ascii=False))
        return

    view = UIDiffView(console=console, max_width=active_settings.display_max_width)
    view.display_diff(diff_result, max_lines=None if show_all else active_settings.display_max_lines)


@app.command()
def diff(
    file1: str = typer.Argument(..., help="Premier fichier (original)"),
    file2: str = typer.Argument(..., help="Deuxième fichier (modifié)"),
    lookahead: Optional[int] = typer.Option(
        None, "--lookahead", "-l", help="Taille de la fenêtre de resynchronisation (4 par défaut)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Sortie JSON"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Écrit le diff unifié dans ce fichier"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Affiche toutes les lignes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Mode verbeux"),
):
    """
    Affiche le diff entre deux fichiers
    """
    init_app()
    logger = Logger()
    if verbose:
        logger.set_level("DEBUG")

    try:
        diff_result = diff_engine.compute_file_diff(file1, file2, lookahead=lookahead)
        _report(diff_result, as_json=as_json, output=output, show_all=show_all, logger=logger)
    except FileManagerError as e:
        logger.log_error(str(e))
        console.print(f"[red]Error reading files: {escape(str(e))}[/red]")
        sys.exit(1)
    except DiffEngineError as e:
        logger.log_error(str(e))
        console.print(f"[red]Invalid option: {escape(str(e))}[/red]")
        sys.exit(1)


@app.command()
def demo(
    as_json: bool = typer.Option(False, "--json", help="Sortie JSON"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Affiche toutes les lignes"),
):
    """
    Compare les deux documents de démonstration
    """
    init_app()
    logger = Logger()
    diff_result = diff_engine.compute_diff(DEMO_SOURCE, DEMO_TARGET, "original", "modified")
    _report(diff_result, as_json=as_json, output=None, show_all=show_all, logger=logger)


@app.command()
def version():
    """
    Affiche la version de linediff
    """
    active_settings = init_app()
    version_info = f"""
linediff v{active_settings.metadata.get('version', '1.0.0')}

Line-level diff engine with bounded lookahead alignment
    """
    console.print(Panel(version_info.strip(), border_style="cyan"))


def main():
    """Point d'entrée principal"""
    app()


if __name__ == "__main__":
    main()
