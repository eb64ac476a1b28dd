"""Loan menu of the library manager: lending, returns and listings."""

from __future__ import annotations

import datetime as _dt

from labprojects.console import Console
from labprojects.library_store import (
    LibraryFiles,
    append_loan,
    find_book_by_isbn,
    load_books,
    load_loans,
    next_id,
    save_loans,
)
from labprojects.library_types import (
    ISBN_LENGTH,
    Date,
    Loan,
    Status,
    prompt_date,
    prompt_name,
    prompt_status,
    validate_isbn,
)

_ISBN_INPUT_SIZE = ISBN_LENGTH + 2


def _loan_summary(loan: Loan) -> str:
    return (
        f"ID: {loan.id} | Leitor: {loan.reader} | ISBN do Livro: {loan.isbn} "
        f"| Data: {loan.date}\n"
    )


def _is_past(day: Date, today: _dt.date) -> bool:
    return (day.year, day.month, day.day) < (today.year, today.month, today.day)


def book_on_loan(files: LibraryFiles, isbn: str) -> bool:
    """Tell whether the book with ``isbn`` has a loan in progress."""
    return any(
        loan.isbn == isbn and loan.status is Status.IN_PROGRESS
        for loan in load_loans(files.loans)
    )


def register_loan(
    console: Console, files: LibraryFiles, today: _dt.date | None = None
) -> Loan | None:
    """Ask for a book, a reader and a date, and record a new loan.

    Returns the saved loan, or None when nothing was saved.
    """
    today = today or _dt.date.today()
    books = load_books(files.books)
    if not books:
        console.write(
            "\nNenhum livro cadastrado no sistema. Impossível realizar empréstimo.\n"
        )
        return None

    while True:
        console.write(
            "\nDigite o ISBN do livro a ser emprestado (ou digite '0' para voltar): "
        )
        isbn = console.read_limited(_ISBN_INPUT_SIZE)
        if isbn == "0":
            console.write("\nOperação cancelada.\n")
            return None
        if not validate_isbn(isbn):
            console.write("Erro: Formato de ISBN inválido. Deve conter 13 números.\n")
            continue
        position = find_book_by_isbn(books, isbn)
        if position is None:
            console.write("Erro: Livro com este ISBN não encontrado.\n")
            continue
        if book_on_loan(files, isbn):
            console.write("Erro: Este livro já possui um empréstimo em andamento.\n")
            continue
        book = books[position]
        console.write(f"Livro encontrado: {book.title}\n")
        break

    console.write("\nDigite o nome do leitor: ")
    reader = prompt_name(console)

    console.write("\nDigite a data do empréstimo.\n")
    while True:
        loan_date = prompt_date(console)
        if _is_past(loan_date, today):
            console.write(
                "Erro: A data do empréstimo não pode ser no passado. Tente novamente.\n"
            )
            continue
        break

    console.write("\n--- Revise os Dados do Empréstimo ---\n")
    console.write(f"Leitor: {reader}\n")
    console.write(f"Livro: {book.title} (ISBN: {isbn})\n")
    console.write(f"Data: {loan_date}\n")
    console.write(
        "\nDeseja confirmar e salvar este empréstimo? (1-Sim / Outro número-Não): "
    )
    if console.read_int() != 1:
        console.write("\nOperação cancelada pelo usuário.\n")
        return None

    loan = Loan(next_id(files.loans), reader, isbn, loan_date, Status.IN_PROGRESS)
    try:
        append_loan(files.loans, loan)
    except OSError:
        console.write("Erro fatal: não foi possível criar o arquivo de empréstimos!\n")
        return None
    console.write("\nEmpréstimo cadastrado com sucesso!\n")
    return loan


def register_return(console: Console, files: LibraryFiles) -> Loan | None:
    """List loans in progress and mark the chosen one as concluded.

    Returns the updated loan, or None when nothing changed.
    """
    loans = load_loans(files.loans)
    if not loans:
        console.write("\nNenhum empréstimo cadastrado para registrar devolução.\n")
        return None

    console.write("\n--- Empréstimos em Andamento ---\n")
    active = [loan for loan in loans if loan.status is Status.IN_PROGRESS]
    for loan in active:
        console.write(_loan_summary(loan))
    if not active:
        console.write("Nenhum empréstimo em andamento para devolução.\n")
        return None

    console.write("\n--- Registrar Devolução ---\n")
    console.write("Digite o ID do empréstimo para devolver (ou 0 para cancelar): ")
    wanted = console.read_int()
    if not wanted:
        console.write("Operação cancelada.\n")
        return None

    loan = next((item for item in loans if item.id == wanted), None)
    if loan is None:
        console.write(f"Erro: Empréstimo com ID {wanted} não encontrado.\n")
        return None
    if loan.status is not Status.IN_PROGRESS:
        console.write(
            "Aviso: Este empréstimo não está 'Em Andamento'. "
            f"Status atual: {loan.status.label()}\n"
        )
        return None

    console.write("\n--- Empréstimo Encontrado ---\n")
    console.write(f"Leitor: {loan.reader}\n")
    console.write(f"ISBN do Livro: {loan.isbn}\n")
    console.write("\nConfirmar devolução deste item? (1-Sim / Outro número-Não): ")
    if console.read_int() != 1:
        console.write("Devolução cancelada.\n")
        return None

    loan.status = Status.CONCLUDED
    try:
        save_loans(files.loans, loans)
    except OSError:
        console.write("Erro fatal ao abrir arquivo de empréstimos!\n")
        return None
    console.write(f"Devolução do empréstimo ID {wanted} registrada com sucesso!\n")
    return loan


def list_loans_by_status(console: Console, files: LibraryFiles) -> list[Loan]:
    """Ask for a status and list the loans that have it."""
    loans = load_loans(files.loans)
    if not loans:
        console.write("\nNenhum empréstimo cadastrado para listar.\n")
        return []

    console.write("\n--- Listar Empréstimos por Status ---\n")
    status = prompt_status(console)
    console.write(f"\n--- Empréstimos com status '{status.label()}' ---\n")
    matching = [loan for loan in loans if loan.status is status]
    for loan in matching:
        console.write(_loan_summary(loan))
    if not matching:
        console.write("Nenhum empréstimo encontrado com este status.\n")
    return matching


def loans_menu(console: Console, files: LibraryFiles) -> None:
    """Run the loans menu until the user chooses 0."""
    while True:
        console.write(
            "\n--- Módulo de Empréstimos ---\n"
            "1. Cadastrar Empréstimo\n"
            "2. Registrar Devolução\n"
            "3. Listar Empréstimos por Status\n"
            "0. Voltar ao menu principal\n"
            "Escolha uma opção: "
        )
        option = console.read_int()
        if option == 1:
            register_loan(console, files)
        elif option == 2:
            register_return(console, files)
        elif option == 3:
            list_loans_by_status(console, files)
        elif option == 0:
            console.write("Retornando ao menu principal...\n")
            return
        else:
            console.write("Opção inválida! Tente novamente.\n")