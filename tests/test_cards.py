import random

import pytest

from labprojects.cards import (
    Card,
    CardStack,
    EmptyQueueError,
    EmptyStackError,
    Player,
    PlayerQueue,
    buy_card,
    create_deck,
    discard_card,
    is_valid_play,
    shuffle_deck,
)


def test_card_str():
    assert str(Card("C", "A")) == "[AC]"


def test_stack_lifo():
    stack = CardStack()
    first, second = Card("C", "A"), Card("O", "2")
    stack.push(first)
    stack.push(second)
    assert len(stack) == 2
    assert stack.peek() == second
    assert stack.pop() == second
    assert stack.pop() == first
    assert stack.is_empty()


def test_stack_empty_errors():
    stack = CardStack()
    with pytest.raises(EmptyStackError):
        stack.pop()
    with pytest.raises(EmptyStackError):
        stack.peek()
    with pytest.raises(EmptyStackError):
        stack.describe()


def test_stack_iterates_top_down_and_describes():
    stack = CardStack([Card("C", "A"), Card("E", "K")])
    assert list(stack) == [Card("E", "K"), Card("C", "A")]
    assert stack.describe() == "Pilha (2 cartas): [KE] [AC] \n"


def test_create_deck():
    deck = create_deck()
    cards = list(deck)
    assert len(deck) == 52
    assert len(set(cards)) == 52
    assert deck.peek() == Card("E", "K")
    assert cards[-1] == Card("C", "A")


def test_shuffle_keeps_cards_and_is_seeded():
    deck_a, deck_b = create_deck(), create_deck()
    shuffle_deck(deck_a, random.Random(5))
    shuffle_deck(deck_b, random.Random(5))
    assert list(deck_a) == list(deck_b)
    assert sorted(list(deck_a), key=str) == sorted(list(create_deck()), key=str)


def test_player_name_truncated():
    player = Player("x" * 80)
    assert len(player.name) == 49


def test_remove_card_keeps_order():
    player = Player("Ana")
    cards = [Card("C", "A"), Card("O", "2"), Card("P", "3")]
    for card in cards:
        player.add_card(card)
    assert player.remove_card(1) == Card("O", "2")
    assert list(player.hand) == [Card("P", "3"), Card("C", "A")]


def test_remove_card_out_of_range():
    player = Player("Ana")
    player.add_card(Card("C", "A"))
    with pytest.raises(IndexError):
        player.remove_card(1)


def test_format_hand():
    player = Player("Ana")
    assert player.format_hand() == "\nCartas de Ana:\n  Nenhuma carta na mão\n"
    player.add_card(Card("C", "A"))
    player.add_card(Card("E", "K"))
    assert player.format_hand() == "\nCartas de Ana:\n  2: [A-C]\n  1: [K-E]\n"


def test_queue_fifo_and_rotate():
    queue = PlayerQueue()
    a, b, c = Player("A"), Player("B"), Player("C")
    for player in (a, b, c):
        queue.enqueue(player)
    assert queue.front() is a
    queue.rotate()
    assert [p.name for p in queue] == ["B", "C", "A"]
    assert queue.dequeue() is b
    assert len(queue) == 2


def test_queue_empty():
    queue = PlayerQueue()
    assert queue.is_empty()
    assert queue.describe() == "Fila Vazia.\n"
    queue.rotate()
    assert len(queue) == 0
    with pytest.raises(EmptyQueueError):
        queue.dequeue()
    with pytest.raises(EmptyQueueError):
        queue.front()


def test_queue_describe():
    player = Player("Bia")
    player.add_card(Card("C", "A"))
    queue = PlayerQueue([player])
    assert queue.describe() == "Fila de Jogadores (1): \n- Bia (Pontos: 0, Cartas: 1)\n\n"


def test_buy_card():
    deck = create_deck()
    player = Player("Ana")
    card = buy_card(player, deck)
    assert card == Card("E", "K")
    assert player.hand.peek() == card
    assert len(deck) == 51


def test_buy_from_empty_deck():
    with pytest.raises(EmptyStackError):
        buy_card(Player("Ana"), CardStack())


def test_discard_card():
    player = Player("Ana")
    player.add_card(Card("C", "A"))
    player.add_card(Card("O", "2"))
    pile = CardStack()
    assert discard_card(player, 2, pile) == Card("C", "A")
    assert pile.peek() == Card("C", "A")
    assert list(player.hand) == [Card("O", "2")]


def test_discard_with_empty_hand():
    with pytest.raises(EmptyStackError):
        discard_card(Player("Ana"), 1, CardStack())


@pytest.mark.parametrize(
    "top, played, expected",
    [
        (Card("C", "A"), Card("C", "K"), True),
        (Card("C", "A"), Card("E", "A"), True),
        (Card("C", "A"), Card("E", "K"), False),
    ],
)
def test_is_valid_play(top, played, expected):
    assert is_valid_play(top, played) is expected