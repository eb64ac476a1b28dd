# labprojects

This package contains three small console programs and the code they are built from:

- **Sorting** (`labprojects.sorting`, `labprojects.benchmark`): in-place gnome,
  insertion, bubble, quick and merge sort. It also has a step-by-step gnome sort
  trace and a timing comparison of all five algorithms.
- **Library manager** (`labprojects.library_app`, `books`, `loans`, `reports`,
  `library_types`, `library_store`): a menu-driven manager for books and loans.
  Data is kept in plain comma-separated text files.
- **Card game** (`labprojects.cards`, `labprojects.cardgame`): a shedding game
  for 2 to 4 players. You win by playing every card in your hand onto the
  discard pile. A card can be played when it has the same value or the same
  suit as the top card.

All text shown to the user is in Brazilian Portuguese.

## Installation

```
pip install .
```

To install the test dependencies too, run `pip install .[test]`.

## Commands

```
labprojects-gnome-trace [OUTPUT]
```
Runs gnome sort on the worst-case list `9 7 6 5 4 3 2`. Before each step it
writes the current position and the state of the list to `OUTPUT`. The default
file is `GnomeSort.txt`.

```
labprojects-benchmark [--size N] [--seed S]
```
Fills a list with `N` random numbers from 0 to 999. The default is 50000.
Each algorithm then sorts its own copy of that list, and the command prints
the CPU time each one took. Use `--seed` to get the same data on every run.

```
labprojects-library [--data-dir DIR]
```
Starts the library manager. The default for `DIR` is `arquivos`. It has three
menus:

- Books: register, remove and update a book.
- Loans: register a loan, register a return, and list loans by status.
- Reports: list books by genre, and show whether each book is available.

Books are stored in `DIR/livros.txt` and loans in `DIR/emprestimos.txt`. When
a file is missing, it is treated as empty. The program stops when you choose
`0` or when input ends.

```
labprojects-cards [--seed S]
```
Starts the card game menu. From there you can start a game or read the rules.

Each player is dealt five cards, and one card is turned over to start the
discard pile. On your turn you either buy a card or discard a matching one.
When the deck runs out, the discard pile is reshuffled into a new deck and
only its top card stays on the pile.

## Using the code

```python
from labprojects.sorting import merge_sort, quick_sort, gnome_sort_steps

values = [3, 7, 6, 4, 8, 5, 9, 2]
merge_sort(values, 0, len(values) - 1)   # in place, inclusive bounds
print(values)

other = [9, 7, 6, 5, 4, 3, 2]
quick_sort(other, 0, len(other))          # in place, exclusive right bound

for pos, state in gnome_sort_steps([3, 1, 2]):
    print(pos, state)
```

```python
from labprojects.cards import Card, Player, create_deck, buy_card, is_valid_play

deck = create_deck()
print(len(deck))                                      # 52
print(is_valid_play(Card("C", "A"), Card("C", "7")))  # True: same suit
player = Player("Ana")
print(buy_card(player, deck))                         # the top card, e.g. [KE]
```

```python
from labprojects.library_types import validate_isbn, validate_date
from labprojects.library_store import load_books

validate_isbn("9780000000001")   # True
validate_date(29, 2, 2024)       # True
books = load_books("arquivos/livros.txt")
```

The menus read and write through `labprojects.console.Console`. You can give it
any text streams, for example `io.StringIO`, to script a session.

## Limitations

- The library manager does not create its data directory. Create `arquivos`
  (or the directory given with `--data-dir`) before you save anything.
  Otherwise saving reports an error.
- Records are read in file order. Reading stops at the first line that does
  not parse.
- The card game keeps no scores and saves nothing between games.

## Tests

```
pytest
```