"""Tests for the daily pool job."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from sealedforge.jobs.daily_pool import main, run_daily_pool
from sealedforge.services.sets import SetInfo


@pytest.fixture
def set_list() -> list[SetInfo]:
    return [
        SetInfo("lea", "Limited Edition Alpha", "1993-08-05"),
        SetInfo("dsk", "Duskmourn", "2024-09-27"),
    ]


class TestRunDailyPool:
    async def test_builds_pool_for_daily_set(self, set_list, full_catalog) -> None:
        """The day's set is fetched and opened with the day's seed."""
        with (
            patch(
                "sealedforge.jobs.daily_pool.fetch_all_catalog",
                new_callable=AsyncMock,
                return_value=full_catalog,
            ) as fetch_catalog,
            patch(
                "sealedforge.jobs.daily_pool.generate_pool",
                new_callable=AsyncMock,
                return_value=full_catalog[:3],
            ) as generate,
        ):
            chosen, pool = await run_daily_pool(date(2024, 10, 1), num_packs=4, sets=set_list)

        assert chosen.code == "dsk"
        assert pool == full_catalog[:3]
        fetch_catalog.assert_awaited_once_with("dsk")
        generate.assert_awaited_once_with("dsk", full_catalog, 4, "daily-2024-10-01")

    async def test_downloads_set_list_when_omitted(self, set_list) -> None:
        with (
            patch(
                "sealedforge.jobs.daily_pool.fetch_sets",
                new_callable=AsyncMock,
                return_value=set_list,
            ) as fetch_sets,
            patch(
                "sealedforge.jobs.daily_pool.fetch_all_catalog",
                new_callable=AsyncMock,
                return_value=[],
            ),
            patch(
                "sealedforge.jobs.daily_pool.generate_pool",
                new_callable=AsyncMock,
                return_value=[],
            ),
        ):
            chosen, pool = await run_daily_pool(date(2024, 10, 1))

        fetch_sets.assert_awaited_once()
        assert chosen.code == "dsk"
        assert pool == []

    async def test_no_eligible_sets(self) -> None:
        with pytest.raises(ValueError, match="No sets eligible"):
            await run_daily_pool(date(2024, 10, 1), sets=[SetInfo("lea", "Alpha", "1993-08-05")])


class TestMain:
    def test_cli_prints_pool(self, card_factory, capsys) -> None:
        pool = [card_factory("12", "rare")]
        run = AsyncMock(return_value=(SetInfo("dsk", "Duskmourn", "2024-09-27"), pool))

        with (
            patch("sealedforge.jobs.daily_pool.run_daily_pool", run),
            patch("sys.argv", ["sealedforge-daily", "--date", "2024-10-01", "--packs", "2"]),
        ):
            main()

        run.assert_awaited_once_with(date(2024, 10, 1), 2)
        assert "Card 12" in capsys.readouterr().out
