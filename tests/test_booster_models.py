import pytest

from sealedforge.errors import MalformedConfigError
from sealedforge.models.booster import (
    BoosterSlotDef,
    parse_booster_file,
    parse_booster_index,
)


class TestBoosterSlotDef:
    def test_parses_mythic_rate_alias(self) -> None:
        slot = BoosterSlotDef.model_validate(
            {"count": 1, "rarities": ["rare", "mythic"], "mythicRate": 0.2, "pool": {}}
        )
        assert slot.mythic_rate == 0.2
        assert slot.effective_mythic_rate == 0.2

    def test_default_mythic_rate(self) -> None:
        slot = BoosterSlotDef(count=1, rarities=["rare", "mythic"], pool={"nonfoil": ["1-5"]})
        assert slot.rolls_mythic is True
        assert slot.effective_mythic_rate == 0.125

    def test_rare_only_slot_does_not_roll_mythic(self) -> None:
        assert BoosterSlotDef(count=1, rarities=["rare"]).rolls_mythic is False

    def test_wildcard_slot(self) -> None:
        slot = BoosterSlotDef(count=1, pool={"foil": ["1-300"]})
        assert slot.is_wildcard is True
        assert slot.produces_cards is True

    def test_informational_slots_produce_nothing(self) -> None:
        assert BoosterSlotDef(name="notes").produces_cards is False
        assert BoosterSlotDef(count=2).produces_cards is False
        assert BoosterSlotDef(count=0, pool={"nonfoil": ["1"]}).produces_cards is False

    def test_ranges_by_finish(self) -> None:
        slot = BoosterSlotDef(
            count=1, pool={"nonfoil": ["1-10"], "foil": ["11"], "etched": ["12-20"]}
        )
        assert slot.ranges() == ["1-10", "11", "12-20"]
        assert slot.ranges(("nonfoil", "foil")) == ["1-10", "11"]
        assert BoosterSlotDef(name="notes").ranges() == []


class TestParseBoosterFile:
    def test_valid_file(self) -> None:
        booster_file = parse_booster_file(
            {
                "setName": "Murders at Karlov Manor",
                "source": "wotc",
                "slots": [{"name": "common", "count": 6, "rarities": ["common"]}],
                "notes": "ignored",
            },
            source="mkm-play.json",
        )
        assert booster_file.set_name == "Murders at Karlov Manor"
        assert booster_file.slots[0].count == 6

    def test_missing_slots_is_malformed(self) -> None:
        with pytest.raises(MalformedConfigError, match="mkm-play.json"):
            parse_booster_file({"setName": "MKM"}, source="mkm-play.json")

    def test_wrong_shape_is_malformed(self) -> None:
        with pytest.raises(MalformedConfigError):
            parse_booster_file(["not", "a", "file"], source="x.json")


class TestParseBoosterIndex:
    def test_valid_index(self) -> None:
        index = parse_booster_index({"version": "1.2.0", "boosters": {"mkm": ["play"]}})
        assert index.types_for("MKM") == ["play"]
        assert index.types_for("otj") is None

    def test_malformed_index(self) -> None:
        with pytest.raises(MalformedConfigError):
            parse_booster_index({"boosters": ["mkm"]})
