"""Main menu of the library manager."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from labprojects.books import books_menu
from labprojects.console import Console, EndOfInput
from labprojects.library_store import LibraryFiles
from labprojects.loans import loans_menu
from labprojects.reports import reports_menu

_MAIN_MENU = (
    "Sistema de Gerenciamento de uma biblioteca\n"
    "Escolha a opção que você quer acessar:\n"
    "0.Sair\n1.Livros\n2.Empréstimos\n3.Relatórios\n"
)


def run(console: Console, files: LibraryFiles) -> None:
    """Run the main menu until the user chooses 0."""
    submenus = {1: books_menu, 2: loans_menu, 3: reports_menu}
    while True:
        console.write(_MAIN_MENU)
        option = console.read_int()
        if option == 0:
            console.write("Fechando programa\n")
            return
        submenu = submenus.get(option)
        if submenu is not None:
            submenu(console, files)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the library manager on standard input and output."""
    parser = argparse.ArgumentParser(description="Library management system.")
    parser.add_argument("--data-dir", default="arquivos")
    args = parser.parse_args(argv)
    try:
        run(Console(), LibraryFiles(Path(args.data_dir)))
    except EndOfInput:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())