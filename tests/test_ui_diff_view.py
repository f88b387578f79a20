import io

from rich.console import Console

from data.diff_engine import align
from presentation.ui_diff_view import UIDiffView


def render(diff_result, max_lines=None, max_width=160):
    buffer = io.StringIO()
    view = UIDiffView(console=Console(file=buffer, width=200), max_width=max_width)
    view.display_diff(diff_result, max_lines=max_lines)
    return buffer.getvalue()


def row_cells(output, content):
    """Cellules de la ligne du tableau dont le contenu est `content`"""
    for line in output.splitlines():
        cells = [cell for cell in line.split() if cell != "│"]
        if cells and cells[-1] == content:
            return cells
    return None


def test_missing_line_numbers_and_markers():
    output = render(align("a\nb", "a\nc"))
    assert row_cells(output, "a")[-3:] == ["1", "1", "a"]
    assert row_cells(output, "b")[-4:] == ["2", "-", "-", "b"]
    assert row_cells(output, "c")[-4:] == ["-", "2", "+", "c"]


def test_counts_badges():
    output = render(align("a\nb", "a\nc"))
    assert "+1" in output
    assert "-1" in output
    assert "=1" in output


def test_truncated_listing_shows_hidden_line_footer():
    output = render(align("a\nb\nc", "x\ny\nz"), max_lines=2)
    assert row_cells(output, "a")[-4:] == ["1", "-", "-", "a"]
    assert row_cells(output, "x")[-4:] == ["-", "1", "+", "x"]
    assert row_cells(output, "y") is None
    assert "... et 4 autres lignes (--all pour tout afficher)" in output


def test_full_listing_has_no_footer():
    output = render(align("a\nb\nc", "x\ny\nz"))
    assert row_cells(output, "z") is not None
    assert "autres lignes" not in output


def test_long_lines_are_cut_at_max_width():
    output = render(align("abcdefghijklmnop", "abcdefghijklmnop"), max_width=10)
    assert "abcdefghij…" in output
    assert "abcdefghijk" not in output
