"""Tests for the clock-relative AIRAC helpers."""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

import airac_utils
from airac import CYCLE_MAX, Cycle
from airac_utils import get_current_airac, is_airac_start, list_future_airacs


@pytest.fixture
def now() -> datetime:
    return datetime(2021, 2, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch):
    """Pin datetime.now() inside airac_utils to a given UTC instant."""

    def freeze(instant: datetime) -> None:
        class FrozenDatetime(datetime):
            @classmethod
            def now(cls, tz=None):
                return instant if tz is None else instant.astimezone(tz)

        monkeypatch.setattr(airac_utils, "datetime", FrozenDatetime)

    return freeze


@pytest.fixture
def last_cycle() -> Cycle:
    return Cycle(CYCLE_MAX)


class TestGetCurrentAirac:

    def test_current_and_next_start(self, now: datetime) -> None:
        current, next_start = get_current_airac(now)
        assert current == Cycle(1566)
        assert str(current) == "2101"
        assert next_start == datetime(2021, 2, 25, tzinfo=timezone.utc)

    def test_naive_now_is_utc(self) -> None:
        current, _ = get_current_airac(datetime(2021, 2, 25))
        assert str(current) == "2102"

    def test_defaults_to_wall_clock(self) -> None:
        current, next_start = get_current_airac()
        assert current.effective <= datetime.now(timezone.utc) < next_start

    def test_next_start_in_last_cycle(self, last_cycle: Cycle) -> None:
        now = last_cycle.effective + timedelta(days=1)
        current, next_start = get_current_airac(now)
        assert current == last_cycle
        assert next_start == last_cycle.effective + timedelta(days=28)
        assert next_start > now

    def test_logs_at_debug(self, now: datetime, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="airac_utils"):
            get_current_airac(now)
        assert "Current AIRAC: 2101" in caplog.text


class TestListFutureAiracs:

    def test_two_months(self, now: datetime) -> None:
        assert list_future_airacs(months=2, now=now) == [
            ("2101", "2021-01-28"),
            ("2102", "2021-02-25"),
            ("2103", "2021-03-25"),
        ]

    def test_zero_months_is_current_only(self, now: datetime) -> None:
        assert list_future_airacs(months=0, now=now) == [("2101", "2021-01-28")]

    def test_stops_at_last_cycle(self, last_cycle: Cycle) -> None:
        now = last_cycle.effective + timedelta(days=1)
        result = list_future_airacs(months=1, now=now)
        assert result == [(str(last_cycle), last_cycle.effective.strftime("%Y-%m-%d"))]

    def test_last_cycle_reached_from_before(self, last_cycle: Cycle) -> None:
        result = list_future_airacs(months=12, now=(last_cycle - 2).effective)
        assert [code for code, _ in result] == [str(last_cycle - 2), str(last_cycle - 1), str(last_cycle)]

    def test_crosses_year_boundary(self) -> None:
        codes = [code for code, _ in list_future_airacs(months=2, now=datetime(2020, 12, 1))]
        assert codes == ["2012", "2013", "2014", "2101"]

    def test_default_year_ahead(self, now: datetime) -> None:
        result = list_future_airacs(now=now)
        # 360 days ahead reaches 2022-01-27 12:00
        assert result[0] == ("2101", "2021-01-28")
        assert result[-1] == ("2201", "2022-01-27")
        assert len(result) == 14


class TestIsAiracStart:

    def test_effective_date(self) -> None:
        assert is_airac_start(date(2021, 1, 28)) is True

    def test_mid_cycle(self) -> None:
        assert is_airac_start(date(2021, 1, 29)) is False

    def test_datetime_is_reduced_to_date(self) -> None:
        assert is_airac_start(datetime(2021, 2, 25, 18, 0, tzinfo=timezone.utc)) is True

    def test_defaults_to_today(self, frozen_clock) -> None:
        frozen_clock(datetime(2021, 2, 25, 6, 0, tzinfo=timezone.utc))
        assert is_airac_start() is True

        frozen_clock(datetime(2021, 2, 26, 6, 0, tzinfo=timezone.utc))
        assert is_airac_start() is False
