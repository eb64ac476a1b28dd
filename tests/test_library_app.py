import io

import pytest

from labprojects.console import Console, EndOfInput
from labprojects.library_app import main, run
from labprojects.library_store import LibraryFiles, load_books, save_books
from labprojects.library_types import Book, Genre

ISBN = "9780000000001"


def make_console(*lines):
    text = "".join(f"{line}\n" for line in lines)
    return Console(io.StringIO(text), io.StringIO())


@pytest.fixture
def files(tmp_path):
    return LibraryFiles(tmp_path)


def test_run_exits_on_zero(files):
    console = make_console("0")
    run(console, files)
    text = console.stdout.getvalue()
    assert text.endswith("Fechando programa\n")
    assert text.count("Sistema de Gerenciamento de uma biblioteca") == 1


def test_run_ignores_unknown_option(files):
    console = make_console("9", "0")
    run(console, files)
    assert console.stdout.getvalue().count("Sistema de Gerenciamento de uma biblioteca") == 2


def test_run_books_menu_registers_book(files):
    console = make_console("1", "1", ISBN, "Novo Livro", "Autora Teste", "0", "1", "0", "0")
    run(console, files)
    loaded = load_books(files.books)
    assert [(b.isbn, b.title, b.genre) for b in loaded] == [(ISBN, "Novo Livro", Genre.FICTION)]


def test_run_loans_menu(files):
    console = make_console("2", "0", "0")
    run(console, files)
    text = console.stdout.getvalue()
    assert "--- Módulo de Empréstimos ---" in text
    assert "Retornando ao menu principal..." in text


def test_run_reports_menu(files):
    save_books(files.books, [Book(1, ISBN, "Dom Casmurro", "Machado de Assis", Genre.ROMANCE)])
    console = make_console("3", "2", "0", "0")
    run(console, files)
    text = console.stdout.getvalue()
    assert "Dom Casmurro" in text
    assert "Disponível" in text


def test_run_raises_when_input_ends(files):
    console = make_console("1", "0")
    with pytest.raises(EndOfInput):
        run(console, files)


def test_main_quits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert "Fechando programa" in capsys.readouterr().out


def test_main_handles_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert "Sistema de Gerenciamento de uma biblioteca" in capsys.readouterr().out