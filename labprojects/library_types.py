"""Records, validation rules and prompts of the library manager."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from labprojects.console import Console

TEXT_LIMIT = 199
ISBN_LENGTH = 13

_DATE = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")


class Genre(IntEnum):
    FICTION = 0
    TEXTBOOK = 1
    BIOGRAPHY = 2
    COMEDY = 3
    HORROR = 4
    ROMANCE = 5

    def label(self) -> str:
        return _GENRE_LABELS[self]


class Status(IntEnum):
    CONCLUDED = 0
    IN_PROGRESS = 1
    CANCELLED = 2

    def label(self) -> str:
        return _STATUS_LABELS[self]


_GENRE_LABELS = {
    Genre.FICTION: "Ficção",
    Genre.TEXTBOOK: "Didático",
    Genre.BIOGRAPHY: "Biografia",
    Genre.COMEDY: "Comédia",
    Genre.HORROR: "Terror",
    Genre.ROMANCE: "Romance",
}

_STATUS_LABELS = {
    Status.CONCLUDED: "CONCLUÍDO",
    Status.IN_PROGRESS: "EM ANDAMENTO",
    Status.CANCELLED: "CANCELADO",
}


@dataclass
class Date:
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year}"


@dataclass
class Book:
    id: int
    isbn: str
    title: str
    author: str
    genre: Genre


@dataclass
class Loan:
    id: int
    reader: str
    isbn: str
    date: Date
    status: Status


def validate_isbn(isbn: str) -> bool:
    """An ISBN is exactly 13 decimal digits."""
    return len(isbn) == ISBN_LENGTH and isbn.isascii() and isbn.isdigit()


def validate_title(title: str) -> bool:
    """A title has 1 to 199 characters and is not only blanks."""
    return 0 < len(title) <= TEXT_LIMIT and not title.isspace()


def validate_name(name: str) -> bool:
    """A name has 1 to 199 characters, made of letters and spaces, not only spaces."""
    if not validate_title(name):
        return False
    return all(ch.isalpha() or ch == " " for ch in name)


def validate_date(day: int, month: int, year: int) -> bool:
    """Check a calendar date between the years 1900 and 2100."""
    if not 1900 <= year <= 2100 or not 1 <= month <= 12 or day < 1:
        return False
    days_in_month = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    if (year % 4 == 0 and year % 100 != 0) or year % 400 == 0:
        days_in_month[1] = 29
    return day <= days_in_month[month - 1]


def validate_time(hour: int, minute: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59


def format_book(book: Book) -> str:
    """Describe a book the way the menus show it."""
    return (
        f"ISBN: {book.isbn}\n"
        f"Título: {book.title}\n"
        f"ISBN: {book.author}\n"
        f"ISBN: {book.genre.label()}\n"
    )


def _ask_option(console: Console, prompt: str, count: int) -> int:
    while True:
        console.write(prompt)
        option = console.read_int()
        if option is not None and 0 <= option < count:
            return option
        console.write("Opção inválida. Tente novamente.\n")


def prompt_genre(console: Console) -> Genre:
    """List the genres and ask for one until a valid number is given."""
    for genre in Genre:
        console.write(f"{genre.value} - {genre.label()}\n")
    return Genre(_ask_option(console, "Digite o gênero do livro: ", len(Genre)))


def prompt_status(console: Console) -> Status:
    """List the loan statuses and ask for one until a valid number is given."""
    console.write("\nDigite o status:\n")
    for status in Status:
        console.write(f"{status.value} - {status.label()}\n")
    return Status(_ask_option(console, "Digite o número do status: ", len(Status)))


def prompt_isbn(console: Console) -> str:
    """Ask for an ISBN until a valid one is given."""
    while True:
        console.write("\nDigite o ISBN do livro:\n")
        isbn = console.read_limited(ISBN_LENGTH + 1)
        if validate_isbn(isbn):
            return isbn
        console.write("\nErro: ISBN deve conter exatamente 13 números\n")


def prompt_title(console: Console) -> str:
    """Ask for a title until a valid one is given."""
    while True:
        console.write("Nome (máx 199 caracteres): ")
        title = console.read_limited(TEXT_LIMIT + 1)
        if validate_title(title):
            return title
        console.write("Erro: Use apenas letras e espaços no nome e não deixe em branco!\n")


def prompt_name(console: Console) -> str:
    """Ask for a person's name until a valid one is given."""
    while True:
        console.write("(máx 199 caracteres): \n")
        name = console.read_limited(TEXT_LIMIT + 1)
        if validate_name(name):
            return name
        console.write("Erro: Use apenas letras e espaços no nome e não deixe em branco!\n")


def prompt_date(console: Console) -> Date:
    """Ask for a DD/MM/AAAA date until a valid one is given."""
    while True:
        console.write("Data do empréstimo (DD/MM/AAAA): ")
        try:
            line = console.read_line()
        except EOFError:
            console.write("Erro na leitura.\n")
            raise
        match = _DATE.match(line)
        if not match:
            console.write("Erro: Formato inválido! Use DD/MM/AAAA.\n")
            continue
        day, month, year = (int(part) for part in match.groups())
        if not validate_date(day, month, year):
            console.write("Erro: Data inválida!\n")
            continue
        return Date(day, month, year)