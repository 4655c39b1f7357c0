from sealedforge.parsers.scryfall import parse_card, parse_cards

__all__ = [
    "parse_card",
    "parse_cards",
]
