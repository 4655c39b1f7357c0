"""
Scryfall card record parser.

Converts raw card objects from the Scryfall search API into Card records.

Card objects: https://scryfall.com/docs/api/cards
"""

from collections.abc import Iterable
from typing import Any

from sealedforge.models.card import Card


def _image_uri(record: dict[str, Any]) -> str | None:
    """Normal-size image, falling back to the front face of double-faced cards."""
    uris = record.get("image_uris")
    if uris is None:
        faces = record.get("card_faces") or []
        uris = faces[0].get("image_uris") if faces else None
    if not uris:
        return None
    return uris.get("normal")


def parse_card(record: dict[str, Any]) -> Card:
    """
    Build a Card from a Scryfall card object.

    Args:
        record: Raw card object from the Scryfall API

    Returns:
        Card with its booster-relevant attributes

    Raises:
        KeyError: If the record has no id or collector number
    """
    return Card(
        id=record["id"],
        name=record.get("name", ""),
        set_code=record.get("set", "").lower(),
        collector_number=str(record["collector_number"]),
        rarity=record.get("rarity", "common"),
        promo_types=frozenset(record.get("promo_types") or ()),
        frame_effects=frozenset(record.get("frame_effects") or ()),
        booster_eligible=bool(record.get("booster", False)),
        frame=record.get("frame"),
        image_uri=_image_uri(record),
    )


def parse_cards(records: Iterable[dict[str, Any]]) -> list[Card]:
    """Parse a sequence of Scryfall card objects, preserving order."""
    return [parse_card(record) for record in records]
