"""Turn-based card-shedding game played at the console."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence

from labprojects.cards import (
    CardStack,
    EmptyStackError,
    Player,
    PlayerQueue,
    buy_card,
    create_deck,
    discard_card,
    is_valid_play,
    shuffle_deck,
)
from labprojects.console import Console, EndOfInput

HAND_SIZE = 5
MIN_PLAYERS = 2
MAX_PLAYERS = 4

RULES = (
    "\n--- REGRAS DO JOGO ---\n"
    "1. O objetivo é descartar todas as cartas da mão.\n"
    "2. Para descartar uma carta, ela deve ter:\n"
    "   - O mesmo valor (ex.: 'A', '2', 'K') OU\n"
    "   - O mesmo naipe (ex.: 'C' para Copas, 'O' para Ouros).\n"
    "3. Se não puder descartar, compre uma carta do baralho.\n"
    "4. O primeiro jogador a ficar sem cartas vence!\n"
    "\n--- SIGNIFICADO DAS CARTAS ---\n"
    "Valores:\n"
    "   - 'A': Ás\n"
    "   - '2' a '9': Valores numéricos\n"
    "   - 'D': 10\n"
    "   - 'J': Valete\n"
    "   - 'Q': Rainha\n"
    "   - 'K': Rei\n"
    "Naipes:\n"
    "   - 'C': Copas\n"
    "   - 'O': Ouros\n"
    "   - 'P': Paus\n"
    "   - 'E': Espadas\n"
    "\nDigite 0 para voltar ao menu inicial.\n"
    "Escolha: "
)


def deal(players: Iterable[Player], deck: CardStack, cards_each: int = HAND_SIZE) -> None:
    """Deal ``cards_each`` cards round-robin from the top of ``deck``."""
    seats = list(players)
    for _ in range(cards_each):
        for player in seats:
            if not deck.is_empty():
                player.add_card(deck.pop())


def recycle_discards(deck: CardStack, pile: CardStack, rng: random.Random | None = None) -> bool:
    """When the deck is empty, turn the discards (except the top one) into a new deck.

    Returns True when the deck was rebuilt.
    """
    if not deck.is_empty() or pile.is_empty():
        return False
    top = pile.pop()
    while not pile.is_empty():
        deck.push(pile.pop())
    pile.push(top)
    shuffle_deck(deck, rng)
    return True


def _play_turn(console: Console, player: Player, deck: CardStack, pile: CardStack) -> None:
    while True:
        top = pile.peek()
        console.write(f"Topo do descarte: [{top.value}-{top.suit}]\n")
        console.write(player.format_hand())
        console.write("\nEscolha uma ação:\n1. Comprar carta\n2. Descartar carta\nEscolha: ")
        action = console.read_int()
        if action == 1:
            try:
                card = buy_card(player, deck)
            except EmptyStackError:
                console.write("Baralho vazio!\n")
            else:
                console.write(f"Você comprou: {card}\n")
            return
        if action != 2:
            continue
        if player.hand.is_empty():
            console.write("Você não tem cartas para descartar!\n")
            return
        console.write("Escolha o número da carta para descartar: ")
        index = console.read_int()
        if index is None or not 1 <= index <= len(player.hand):
            console.write("Índice inválido!\n")
            continue
        chosen = list(player.hand)[index - 1]
        if is_valid_play(top, chosen):
            card = discard_card(player, index, pile)
            console.write(f"Descartou: {card}\n")
            return
        console.write("Jogada inválida! Carta não combina com o topo do descarte.\n")


def start_game(
    console: Console, num_players: int, rng: random.Random | None = None
) -> Player | None:
    """Play one game to the end and return the winner."""
    rng = rng or random.Random()
    deck = create_deck()
    shuffle_deck(deck, rng)
    pile = CardStack()
    turns = PlayerQueue(Player(f"Jogador {n}") for n in range(1, num_players + 1))

    deal(turns, deck, HAND_SIZE)
    if not deck.is_empty():
        pile.push(deck.pop())

    while not turns.is_empty():
        player = turns.front()
        console.write(f"\n--- VEZ DE {player.name} ---\n")
        _play_turn(console, player, deck, pile)

        won = player.hand.is_empty()
        if won:
            console.write(f"\nPARABÉNS! {player.name} VENCEU O JOGO!\n")
        turns.rotate()
        if recycle_discards(deck, pile, rng):
            console.write("\nBaralho reciclado!\n")
        if won:
            return player
    return None


def show_rules(console: Console) -> None:
    """Show the rules until the user chooses 0."""
    while True:
        console.write(RULES)
        if console.read_int() == 0:
            return


def _menu(console: Console, rng: random.Random) -> None:
    while True:
        console.write(
            "\nJOGO DE CARTAS\n1. Iniciar novo jogo\n2. Regras do jogo\n3. Sair\nEscolha: "
        )
        choice = console.read_int()
        if choice == 1:
            console.write(f"Número de jogadores ({MIN_PLAYERS}-{MAX_PLAYERS}): ")
            count = console.read_int()
            if count is not None and MIN_PLAYERS <= count <= MAX_PLAYERS:
                start_game(console, count, rng)
            else:
                console.write("Número inválido de jogadores!\n")
        elif choice == 2:
            show_rules(console)
        elif choice == 3:
            console.write("Fechando programa...\n")
            return
        else:
            console.write("Opção inválida! Tente novamente.\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the card game menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Card-shedding game.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        _menu(Console(), random.Random(args.seed))
    except EndOfInput:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())