"""Cards, card stacks, players and the turn queue for the card game."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

SUITS = ("C", "O", "P", "E")  # Copas, Ouros, Paus, Espadas
VALUES = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "D", "J", "Q", "K")  # D = 10
NAME_LIMIT = 49


class EmptyStackError(LookupError):
    """Raised when taking a card from an empty stack."""


class EmptyQueueError(LookupError):
    """Raised when taking a player from an empty queue."""


@dataclass(frozen=True)
class Card:
    suit: str
    value: str

    def __str__(self) -> str:
        return f"[{self.value}{self.suit}]"


class CardStack:
    """A last-in, first-out pile of cards."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def pop(self) -> Card:
        if not self._cards:
            raise EmptyStackError("Erro de fila vazia")
        return self._cards.pop()

    def peek(self) -> Card:
        if not self._cards:
            raise EmptyStackError("Erro de fila vazia")
        return self._cards[-1]

    def is_empty(self) -> bool:
        return not self._cards

    def describe(self) -> str:
        """Describe the stack from top to bottom."""
        if not self._cards:
            raise EmptyStackError("Erro de fila vazia")
        cards = "".join(f"{card} " for card in self)
        return f"Pilha ({len(self)} cartas): {cards}\n"

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the top card down."""
        return reversed(self._cards)


@dataclass
class Player:
    name: str
    hand: CardStack = field(default_factory=CardStack)
    points: int = 0

    def __post_init__(self) -> None:
        self.name = self.name[:NAME_LIMIT]

    def add_card(self, card: Card) -> None:
        self.hand.push(card)

    def remove_card(self, index: int) -> Card:
        """Remove and return the card ``index`` places below the top (0 is the top)."""
        if not 0 <= index < len(self.hand):
            raise IndexError(f"no card at position {index}")
        held = [self.hand.pop() for _ in range(index)]
        selected = self.hand.pop()
        for card in reversed(held):
            self.hand.push(card)
        return selected

    def format_hand(self) -> str:
        """List the hand, numbering cards from the top (1) and printing the bottom first."""
        lines = [f"\nCartas de {self.name}:\n"]
        if self.hand.is_empty():
            lines.append("  Nenhuma carta na mão\n")
            return "".join(lines)
        bottom_first = list(self.hand)[::-1]
        count = len(bottom_first)
        for offset, card in enumerate(bottom_first):
            lines.append(f"  {count - offset}: [{card.value}-{card.suit}]\n")
        return "".join(lines)


class PlayerQueue:
    """First-in, first-out queue of players taking turns."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: deque[Player] = deque(players)

    def enqueue(self, player: Player) -> None:
        self._players.append(player)

    def dequeue(self) -> Player:
        if not self._players:
            raise EmptyQueueError("Erro: Fila Vazia")
        return self._players.popleft()

    def front(self) -> Player:
        if not self._players:
            raise EmptyQueueError("Erro: Fila Vazia")
        return self._players[0]

    def is_empty(self) -> bool:
        return not self._players

    def rotate(self) -> None:
        """Move the front player to the back."""
        if len(self._players) > 1:
            self._players.rotate(-1)

    def describe(self) -> str:
        if not self._players:
            return "Fila Vazia.\n"
        lines = [f"Fila de Jogadores ({len(self)}): \n"]
        lines.extend(
            f"- {p.name} (Pontos: {p.points}, Cartas: {len(p.hand)})\n" for p in self._players
        )
        lines.append("\n")
        return "".join(lines)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)


def create_deck() -> CardStack:
    """Build the 52-card deck, suit by suit."""
    return CardStack(Card(suit, value) for suit in SUITS for value in VALUES)


def shuffle_deck(deck: CardStack, rng: random.Random | None = None) -> None:
    """Shuffle ``deck`` in place with a Fisher-Yates shuffle."""
    rng = rng or random.Random()
    cards = [deck.pop() for _ in range(len(deck))]
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randrange(i + 1)
        cards[i], cards[j] = cards[j], cards[i]
    for card in cards:
        deck.push(card)


def buy_card(player: Player, deck: CardStack) -> Card:
    """Move the top card of ``deck`` into the player's hand and return it."""
    if deck.is_empty():
        raise EmptyStackError("Baralho vazio!")
    card = deck.pop()
    player.add_card(card)
    return card


def discard_card(player: Player, index: int, pile: CardStack) -> Card:
    """Move the player's card at 1-based ``index`` onto ``pile`` and return it."""
    if player.hand.is_empty():
        raise EmptyStackError("Você não tem cartas!")
    card = player.remove_card(index - 1)
    pile.push(card)
    return card


def is_valid_play(top: Card, played: Card) -> bool:
    """A card may be played on ``top`` when it shares the suit or the value."""
    return top.suit == played.suit or top.value == played.value