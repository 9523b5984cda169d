from .constants import NUM_PLAYERS, NUM_RANKS, RANK_CHARS

SUIT = "s"


def card_to_rank(card: str) -> int:
    """Convert a card string (e.g. 'K' or 'Ks') to a 0..3 rank, Jack lowest."""
    if len(card) not in (1, 2):
        raise ValueError(f"Invalid card: {card}")
    rank = card[0].upper()
    if rank not in RANK_CHARS or (len(card) == 2 and card[1].lower() != SUIT):
        raise ValueError(f"Invalid card: {card}")
    return RANK_CHARS.index(rank)


def rank_to_card(rank: int) -> str:
    if not (0 <= rank < NUM_RANKS):
        raise ValueError(f"Card rank out of range: {rank}")
    return RANK_CHARS[rank]


def parse_deal(cards: str) -> list[int]:
    """
    Parse one card per seat into ranks.

    Examples:
    - "JQK" -> [0, 1, 2]
    - "As Js Qs" -> [3, 0, 1]
    """
    tokens = cards.replace(",", " ").split()
    if len(tokens) == 1:
        tokens = list(tokens[0].lower().replace(SUIT, ""))
    out = [card_to_rank(tok) for tok in tokens]
    if len(out) != NUM_PLAYERS:
        raise ValueError(f"Expected {NUM_PLAYERS} cards, got {cards!r}")
    if len(out) != len(set(out)):
        raise ValueError(f"Duplicate cards in deal: {cards}")
    return out
