from pydantic import BaseModel

from sealedforge.models.card import Card


class CardResponse(BaseModel):
    """A printing in a catalog or pool."""

    id: str
    name: str
    set_code: str
    collector_number: str
    rarity: str
    image_uri: str | None = None

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            name=card.name,
            set_code=card.set_code,
            collector_number=card.collector_number,
            rarity=card.rarity,
            image_uri=card.image_uri,
        )


class PoolResponse(BaseModel):
    """A generated sealed pool."""

    set_code: str
    num_packs: int
    seed: str | None = None
    cards: list[CardResponse]
