"""Book menu of the library manager: registering, updating and removing books."""

from __future__ import annotations

import dataclasses

from labprojects.console import Console
from labprojects.library_store import (
    LibraryFiles,
    append_book,
    find_book_by_isbn,
    load_books,
    save_books,
)
from labprojects.library_types import (
    Book,
    format_book,
    prompt_genre,
    prompt_isbn,
    prompt_name,
    prompt_title,
)

_SAVE_MENU = "\n1. Salvar\n2. Sair sem salvar\nselecione uma opção: "


def _ask_save(console: Console, invalid_message: str) -> bool:
    """Ask whether to save until 1 (save) or 2 (discard) is chosen."""
    console.write("\nDeseja salvar os dados?")
    while True:
        console.write(_SAVE_MENU)
        option = console.read_int()
        if option == 1:
            return True
        if option == 2:
            return False
        console.write(invalid_message)


def register_book(console: Console, files: LibraryFiles) -> Book | None:
    """Ask for a new book's data and append it to the books file.

    Returns the saved book, or None when nothing was saved.
    """
    console.write("\n Novo Livros \n")
    books = load_books(files.books)

    isbn = prompt_isbn(console)
    if find_book_by_isbn(books, isbn) is not None:
        console.write("ISBN ja cadastrado.")
        return None

    console.write("\nTítulo do livro ")
    title = prompt_title(console)
    console.write("\nAutor do livro ")
    author = prompt_name(console)
    genre = prompt_genre(console)

    book = Book(0, isbn, title, author, genre)
    console.write(format_book(book))

    if not _ask_save(console, "Opção inválida!\n"):
        console.write("Cadastro descartado.\n")
        return None
    try:
        append_book(files.books, book)
    except OSError:
        console.write("Erro ao abrir arquivo!\n")
        return None
    console.write("Livro cadastrado com sucesso!\n")
    return book


def _field_menu(book: Book) -> str:
    return (
        "\nSelecione o campo para atualizar:\n"
        f"1. ISBN (atual: {book.isbn})\n"
        f"2. Titulo (atual: {book.title})\n"
        f"3. Autor (atual: {book.author})\n"
        f"4. Gênero (atual: {book.genre.label()})\n"
        "5. Finalizar atualização\n"
        "Escolha: "
    )


def update_book(console: Console, files: LibraryFiles) -> Book | None:
    """Find a book by ISBN, let the user edit its fields and save the change.

    Returns the updated book, or None when nothing was saved.
    """
    books = load_books(files.books)
    console.write("\n--- Atualização de Livro ---\n")
    position = find_book_by_isbn(books, prompt_isbn(console))
    if position is None:
        console.write("livro não encontrado!\n")
        return None

    updated = dataclasses.replace(books[position])
    while True:
        console.write(_field_menu(updated))
        option = console.read_int()
        if option is None:
            console.write("Entrada inválida!\n")
            continue
        if option == 5:
            break
        if option == 1:
            updated.isbn = prompt_isbn(console)
            if find_book_by_isbn(books, updated.isbn) is not None:
                console.write("ISBN ja cadastrado.")
                return None
        elif option == 2:
            console.write("\nTítulo do livro ")
            updated.title = prompt_title(console)
        elif option == 3:
            console.write("\nAutor do livro ")
            updated.author = prompt_name(console)
        elif option == 4:
            console.write("\nNovo genero:\n")
            updated.genre = prompt_genre(console)
        else:
            console.write("Opção inválida!\n")
        console.write("\nDeseja modificar outro campo? (0-Não /1-Sim): ")
        if console.read_int() != 1:
            break

    books[position] = updated
    if not _ask_save(console, "Opção inválida\n"):
        console.write("Atualização descartada\n")
        return None
    try:
        save_books(files.books, books)
    except OSError:
        console.write("Erro ao abrir arquivo!\n")
        return None
    console.write("\nDados atualizados com sucesso\n")
    return updated


def remove_book(console: Console, files: LibraryFiles) -> Book | None:
    """Find a book by ISBN and, once confirmed, delete it from the books file.

    Returns the removed book, or None when nothing was removed.
    """
    books = load_books(files.books)
    console.write("\n--- Atualização de Livro ---\n")
    position = find_book_by_isbn(books, prompt_isbn(console))
    if position is None:
        console.write("livro não encontrado!\n")
        return None

    while True:
        console.write("\nDeseja realmente remover o livro?\n")
        console.write(format_book(books[position]))
        console.write("1. Confirmar\n2. Cancelar\nOpção: ")
        option = console.read_int()
        if option in (1, 2):
            break
        console.write("Opção inválida\n")

    if option == 2:
        console.write("Operação cancelada.\n")
        return None

    removed = books.pop(position)
    try:
        save_books(files.books, books)
    except OSError:
        console.write("Erro ao abrir arquivo!\n")
        return None
    console.write("\nRemoção realizada com sucesso\n")
    return removed


def books_menu(console: Console, files: LibraryFiles) -> None:
    """Run the books menu until the user chooses 0."""
    actions = {1: register_book, 2: remove_book, 3: update_book}
    while True:
        console.write(
            "\nLIVROS\n"
            "Escolha a opção que você quer acessar:\n"
            "0.Voltar\n1.Cadastrar Livro\n2. Remover Livro\n3.Atualizar Livro\n"
        )
        option = console.read_int()
        if option == 0:
            return
        action = actions.get(option)
        if action is not None:
            action(console, files)