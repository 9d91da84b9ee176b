"""Tests for Rich-based display helpers."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from open_opus.cli.display import show_composers_table, show_error, show_genres, show_works_table
from open_opus.models.composer import Composer
from open_opus.models.enums import Genre
from open_opus.models.work import Work


def _capture(func, *args, **kwargs) -> str:
    """Run a display function and capture its Rich output as plain text."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=160)
    import open_opus.cli.display as display_mod

    original = display_mod.console
    display_mod.console = console
    try:
        func(*args, **kwargs)
    finally:
        display_mod.console = original
    return buf.getvalue()


class TestShowComposersTable:
    def test_renders_rows(self, bach, beethoven) -> None:
        composers = [Composer.model_validate(bach), Composer.model_validate(beethoven)]
        output = _capture(show_composers_table, composers, "Popular composers")
        assert "Popular composers (2)" in output
        assert "Johann Sebastian Bach" in output
        assert "1685-1750" in output
        assert "Early Romantic" in output

    def test_unknown_dates(self, bach) -> None:
        bach["birth"] = None
        bach["death"] = None
        output = _capture(show_composers_table, [Composer.model_validate(bach)])
        assert "?-" in output


class TestShowWorksTable:
    def test_renders_rows(self, cello_sonata) -> None:
        output = _capture(show_works_table, [Work.model_validate(cello_sonata)], "Chamber works")
        assert "Chamber works (1)" in output
        assert "Cello Sonata no. 3 in A major" in output
        assert "Op. 69" in output


class TestShowGenres:
    def test_lists_genres(self) -> None:
        output = _capture(show_genres, [Genre.CHAMBER, Genre.VOCAL], 145)
        assert "Genres for composer 145" in output
        assert "Chamber, Vocal" in output

    def test_empty(self) -> None:
        output = _capture(show_genres, [], 145)
        assert "none" in output


class TestShowError:
    def test_renders_error_panel(self) -> None:
        output = _capture(show_error, "Open Opus API Error", "No composers found")
        assert "Open Opus API Error" in output
        assert "No composers found" in output


class TestRemoteTextIsLiteral:
    def test_brackets_in_work_title_are_kept(self, cello_sonata) -> None:
        cello_sonata["title"] = "Requiem [incomplete]"
        output = _capture(show_works_table, [Work.model_validate(cello_sonata)])
        assert "Requiem [incomplete]" in output

    def test_brackets_in_composer_name_are_kept(self, bach) -> None:
        bach["complete_name"] = "J. S. Bach [bold]"
        output = _capture(show_composers_table, [Composer.model_validate(bach)])
        assert "J. S. Bach [bold]" in output

    def test_closing_tag_in_error_message(self) -> None:
        output = _capture(show_error, "Open Opus API Error", "bad path [/composer]")
        assert "bad path [/composer]" in output

    def test_brackets_in_search_word_title(self) -> None:
        output = _capture(show_works_table, [], "Works matching '[/x]'")
        assert "Works matching '[/x]' (0)" in output
