"""Comma-separated storage of books and loans."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from labprojects.library_types import Book, Date, Genre, Loan, Status

BOOKS_HEADER = "id,ISBN,titulo,autor,genero\n"
LOANS_HEADER = "id,leitor,isbn,dia,mes,ano,status\n"
MAX_ID = 1_000_000_000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_BOOK_LINE = re.compile(
    r"\s*([+-]?\d+),([^,]{1,13}),\s*([^,]{1,199}),([^,]{1,199}),\s*([+-]?\d+)"
)
_LOAN_LINE = re.compile(
    r"\s*(\+?\d+),([^,]{1,199}),([^,]{1,13}),"
    r"\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+)"
)

PathLike = str | os.PathLike


@dataclass(frozen=True)
class LibraryFiles:
    """Where the library keeps its data files."""

    directory: Path = Path("arquivos")

    @property
    def books(self) -> Path:
        return Path(self.directory) / "livros.txt"

    @property
    def loans(self) -> Path:
        return Path(self.directory) / "emprestimos.txt"


def _data_lines(path: PathLike) -> list[str]:
    """Lines after the header, or nothing when the file does not exist."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return text.splitlines()[1:]


def _records(path: PathLike, pattern: re.Pattern[str]) -> Iterator[re.Match[str]]:
    """Yield matching records until the first line that does not parse."""
    for line in _data_lines(path):
        if not line.strip():
            continue
        match = pattern.match(line)
        if match is None:
            return
        yield match
        if line[match.end():].strip():
            return


def next_id(path: PathLike) -> int:
    """Return one more than the largest valid id in the file, or 1."""
    ids = []
    for line in _data_lines(path):
        match = _LEADING_INT.match(line)
        if match:
            value = int(match.group(1))
            if 0 < value < MAX_ID:
                ids.append(value)
    return max(ids) + 1 if ids else 1


def load_books(path: PathLike) -> list[Book]:
    """Read the books file; reading stops at the first malformed record."""
    books = []
    for match in _records(path, _BOOK_LINE):
        book_id, isbn, title, author, genre = match.groups()
        try:
            genre_value = Genre(int(genre))
        except ValueError:
            break
        books.append(Book(int(book_id), isbn, title, author, genre_value))
    return books


def load_loans(path: PathLike) -> list[Loan]:
    """Read the loans file; reading stops at the first malformed record."""
    loans = []
    for match in _records(path, _LOAN_LINE):
        loan_id, reader, isbn, day, month, year, status = match.groups()
        try:
            status_value = Status(int(status))
        except ValueError:
            break
        date = Date(int(day), int(month), int(year))
        loans.append(Loan(int(loan_id), reader, isbn, date, status_value))
    return loans


def find_book_by_isbn(books: Sequence[Book], isbn: str) -> int | None:
    """Return the position of the book with ``isbn``, or None."""
    return next((pos for pos, book in enumerate(books) if book.isbn == isbn), None)


def _book_line(book: Book) -> str:
    return f"{book.id},{book.isbn},{book.title},{book.author},{int(book.genre)}\n"


def _loan_line(loan: Loan) -> str:
    d = loan.date
    return f"{loan.id},{loan.reader},{loan.isbn},{d.day},{d.month},{d.year},{int(loan.status)}\n"


def _ensure_header(path: Path, header: str) -> None:
    if not path.exists() or path.stat().st_size == 0:
        path.write_text(header, encoding="utf-8")


def save_books(path: PathLike, books: Iterable[Book]) -> None:
    """Overwrite the books file with ``books``."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(BOOKS_HEADER)
        out.writelines(_book_line(book) for book in books)


def append_book(path: PathLike, book: Book) -> int:
    """Give ``book`` the next free id, append it to the file and return the id."""
    target = Path(path)
    _ensure_header(target, BOOKS_HEADER)
    book.id = next_id(target)
    with target.open("a", encoding="utf-8") as out:
        out.write(_book_line(book))
    return book.id


def save_loans(path: PathLike, loans: Iterable[Loan]) -> None:
    """Overwrite the loans file with ``loans``."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(LOANS_HEADER)
        out.writelines(_loan_line(loan) for loan in loans)


def append_loan(path: PathLike, loan: Loan) -> None:
    """Append ``loan`` to the file, creating it with its header if needed."""
    target = Path(path)
    _ensure_header(target, LOANS_HEADER)
    with target.open("a", encoding="utf-8") as out:
        out.write(_loan_line(loan))