import pytest

from timelane.service.ticks import generate_ticks

from conftest import day


def _labels(ticks) -> list[str]:
    return [tick["label"] for tick in ticks]


def test_daily_ticks_every_day_with_positions():
    ticks = generate_ticks(day("2024-01-01"), day("2024-01-03"), "daily", 300, 60)

    assert _labels(ticks) == ["Jan 1", "Jan 2", "Jan 3"]
    assert [tick["position"] for tick in ticks] == pytest.approx([60, 160, 260])


def test_weekly_anchor_moves_to_following_monday():
    ticks = generate_ticks(day("2024-03-06"), day("2024-03-31"), "weekly", 400, 60)

    assert ticks[0]["date"] == day("2024-03-11")
    assert _labels(ticks) == ["Mar 11", "Mar 18", "Mar 25"]


def test_weekly_anchor_from_sunday_is_next_day():
    ticks = generate_ticks(day("2024-03-10"), day("2024-03-20"), "weekly", 400, 60)

    assert ticks[0]["date"] == day("2024-03-11")


def test_weekly_anchor_on_monday_stays():
    ticks = generate_ticks(day("2024-03-11"), day("2024-03-20"), "weekly", 400, 60)

    assert _labels(ticks) == ["Mar 11", "Mar 18"]
    assert ticks[0]["position"] == pytest.approx(60)


def test_weekly_range_without_monday_has_no_ticks():
    assert generate_ticks(day("2024-03-12"), day("2024-03-15"), "weekly", 400, 60) == []


def test_monthly_ticks_on_first_of_month():
    ticks = generate_ticks(day("2024-01-01"), day("2024-03-15"), "monthly", 740, 60)

    assert _labels(ticks) == ["Jan 2024", "Feb 2024", "Mar 2024"]
    assert [tick["date"] for tick in ticks] == [
        day("2024-01-01"),
        day("2024-02-01"),
        day("2024-03-01"),
    ]


def test_yearly_ticks_on_january_first():
    ticks = generate_ticks(day("2022-01-01"), day("2024-06-01"), "yearly", 740, 60)

    assert _labels(ticks) == ["2022", "2023", "2024"]


@pytest.mark.parametrize("view_mode", ["daily", "monthly", "yearly"])
def test_degenerate_range_yields_one_tick(view_mode):
    moment = day("2024-01-01")

    ticks = generate_ticks(moment, moment, view_mode, 740, 60)

    assert len(ticks) == 1
    assert ticks[0]["position"] == pytest.approx(60)


@pytest.mark.parametrize(
    "view_mode,step",
    [
        ("daily", {"days": 1}),
        ("weekly", {"weeks": 1}),
        ("monthly", {"months": 1}),
        ("yearly", {"years": 1}),
    ],
)
def test_ticks_stay_in_range_one_period_apart(view_mode, step):
    display_min = day("2021-01-01")
    display_max = day("2024-02-20")

    ticks = generate_ticks(display_min, display_max, view_mode, 5000, 60)

    assert ticks
    for tick in ticks:
        assert display_min <= tick["date"] <= display_max
    for previous, current in zip(ticks, ticks[1:]):
        assert previous["date"].add(**step) == current["date"]
        assert previous["position"] < current["position"]


def test_tick_positions_include_left_padding():
    without_padding = generate_ticks(
        day("2024-01-01"), day("2024-01-05"), "daily", 500, 0
    )
    with_padding = generate_ticks(
        day("2024-01-01"), day("2024-01-05"), "daily", 500, 60
    )

    for plain, padded in zip(without_padding, with_padding):
        assert padded["position"] == pytest.approx(plain["position"] + 60)
