"""Report menu of the library manager."""

from __future__ import annotations

from labprojects.console import Console
from labprojects.library_store import LibraryFiles, load_books, load_loans
from labprojects.library_types import Book, Status, format_book, prompt_genre

_SEPARATOR = "----------------------------------------\n"


def list_books_by_genre(console: Console, files: LibraryFiles) -> list[Book]:
    """Ask for a genre and show the books that belong to it."""
    books = load_books(files.books)
    if not books:
        console.write("\nNenhum livro cadastrado para gerar relatório.\n")
        return []

    console.write("\n--- Relatório: Listar Livros por Gênero ---\n")
    genre = prompt_genre(console)
    console.write(f"\nExibindo livros do gênero '{genre.label()}':\n")

    matching = [book for book in books if book.genre is genre]
    for book in matching:
        console.write(_SEPARATOR)
        console.write(format_book(book))

    if not matching:
        console.write("\nNenhum livro encontrado para este gênero.\n")
    else:
        console.write(_SEPARATOR)
        console.write(f"Total de livros encontrados: {len(matching)}\n")
    return matching


def list_books_availability(console: Console, files: LibraryFiles) -> list[tuple[Book, bool]]:
    """Show every book and whether it is currently lent out.

    Returns (book, lent) pairs in file order.
    """
    books = load_books(files.books)
    if not books:
        console.write("\nNenhum livro cadastrado para gerar relatório.\n")
        return []

    lent_isbns = {
        loan.isbn for loan in load_loans(files.loans) if loan.status is Status.IN_PROGRESS
    }
    console.write("\n--- Relatório: Status de Disponibilidade dos Livros ---\n")
    report = []
    for book in books:
        lent = book.isbn in lent_isbns
        label = "Emprestado" if lent else "Disponível"
        console.write(f"Título: {book.title:<30} | ISBN: {book.isbn:<15} | Status: {label}\n")
        report.append((book, lent))
    return report


def reports_menu(console: Console, files: LibraryFiles) -> None:
    """Run the reports menu until the user chooses 0."""
    while True:
        console.write(
            "\n--- Módulo de Relatórios ---\n"
            "Escolha a opção que você quer acessar:\n"
            "1. Listar Livros por Gênero\n"
            "2. Listar Disponibilidade dos Livros\n"
            "0. Voltar\n"
            "Opção: "
        )
        option = console.read_int()
        if option == 1:
            list_books_by_genre(console, files)
        elif option == 2:
            list_books_availability(console, files)
        elif option == 0:
            console.write("Retornando ao menu principal...\n")
            return
        else:
            console.write("\nOpção inválida! Tente novamente.\n")