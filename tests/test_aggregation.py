import pytest

from plot_inventory.data.plot_inventory import get_plot_inventory_by_period
from plot_inventory.data.plot_inventory_by_area import (
    get_all_plots_by_area,
    get_plots_by_area_for_period,
)
from plot_inventory.inventory.aggregation import (
    area_key,
    build_period_summary,
    calculate_all_period_area_summaries,
    calculate_all_period_summaries,
    calculate_inventory_summary,
    calculate_period_area_summary,
    calculate_period_summary,
    calculate_total_area_summary,
    get_inventory_grouped_by_area,
    get_inventory_grouped_by_type,
    usage_rate,
)
from plot_inventory.inventory.models import PERIODS, PlotInventoryItem


# ------------------------------------------------------------
# usage_rate
# ------------------------------------------------------------
def test_usage_rate_rounds_to_one_decimal():
    assert usage_rate(144, 155) == 92.9
    assert usage_rate(1580, 1711) == 92.3
    assert usage_rate(6, 6) == 100


def test_usage_rate_rounds_half_up():
    # 1/8 = 12.5% -> 125.0 tenths exactly; 1/16 = 6.25% -> 62.5 tenths -> 6.3
    assert usage_rate(1, 8) == 12.5
    assert usage_rate(1, 16) == 6.3
    assert usage_rate(3, 16) == 18.8


def test_usage_rate_zero_total():
    assert usage_rate(0, 0) == 0
    assert usage_rate(5, 0) == 0


# ------------------------------------------------------------
# Section summaries
# ------------------------------------------------------------
def test_two_section_fixture_summary():
    items = [
        PlotInventoryItem("1期", "A", 149, 138, 11),
        PlotInventoryItem("1期", "B", 6, 6, 0),
    ]
    s = build_period_summary("1期", items)

    assert (s.period, s.total_count, s.used_count, s.remaining_count) == ("1期", 155, 144, 11)
    assert s.usage_rate == 92.9


@pytest.mark.parametrize("period", PERIODS)
def test_period_summary_is_sum_of_records(period):
    items = get_plot_inventory_by_period(period)
    s = calculate_period_summary(period)

    assert s.total_count == sum(i.total_count for i in items)
    assert s.used_count == sum(i.used_count for i in items)
    assert s.remaining_count == sum(i.remaining_count for i in items)


def test_period_summaries_match_published_figures():
    summaries = {s.period: s for s in calculate_all_period_summaries()}

    assert (summaries["1期"].total_count, summaries["1期"].used_count, summaries["1期"].remaining_count) == (1711, 1580, 131)
    assert summaries["1期"].usage_rate == 92.3
    assert (summaries["2期"].total_count, summaries["2期"].remaining_count) == (604, 52)
    assert summaries["2期"].usage_rate == 91.4
    assert (summaries["3期"].total_count, summaries["3期"].remaining_count) == (574, 48)
    assert summaries["3期"].usage_rate == 91.6
    assert (summaries["4期"].total_count, summaries["4期"].remaining_count) == (799, 398)
    assert summaries["4期"].usage_rate == 50.2


def test_all_period_summaries_complete_and_ordered():
    summaries = calculate_all_period_summaries()

    assert [s.period for s in summaries] == list(PERIODS)
    assert sum(s.total_count for s in summaries) == calculate_inventory_summary().total_count


def test_inventory_summary():
    s = calculate_inventory_summary()

    assert (s.total_count, s.used_count, s.remaining_count) == (3688, 3059, 629)
    assert s.usage_rate == 82.9
    assert s.last_updated == "2025年6月末"


def test_unknown_period_summary_is_zero():
    s = calculate_period_summary("9期")

    assert (s.total_count, s.used_count, s.remaining_count, s.usage_rate) == (0, 0, 0, 0)


# ------------------------------------------------------------
# Area summaries
# ------------------------------------------------------------
def test_period_area_summary_sums_stored_fields():
    s = calculate_period_area_summary("1期")
    items = get_plots_by_area_for_period("1期")

    assert s.items == tuple(items)
    assert (s.total_count, s.used_count, s.remaining_count) == (1739, 1611, 73)
    assert s.total_area_sqm == pytest.approx(5584.84)
    assert s.remaining_area_sqm == pytest.approx(473.3)


def test_remaining_area_is_not_recomputed():
    s = calculate_period_area_summary("4期")
    recomputed = sum(i.remaining_count * i.area_sqm for i in s.items)

    assert s.remaining_area_sqm == pytest.approx(sum(i.remaining_area_sqm for i in s.items))
    assert s.remaining_area_sqm != pytest.approx(recomputed)


def test_all_period_area_summaries():
    summaries = calculate_all_period_area_summaries()

    assert [s.period for s in summaries] == list(PERIODS)
    assert sum(s.total_count for s in summaries) == calculate_total_area_summary().total_count


def test_total_area_summary():
    s = calculate_total_area_summary()

    assert (s.total_count, s.used_count, s.remaining_count) == (3690, 3090, 545)
    assert s.total_area_sqm == pytest.approx(sum(i.total_count * i.area_sqm for i in get_all_plots_by_area()))


# ------------------------------------------------------------
# Groupings
# ------------------------------------------------------------
def test_grouped_by_area_sorted_and_summed():
    groups = get_inventory_grouped_by_area()
    areas = [g.area_sqm for g in groups]

    assert len(groups) == 47
    assert areas == sorted(areas)

    for g in groups:
        members = [i for i in get_all_plots_by_area() if i.area_sqm == g.area_sqm]
        assert g.total_count == sum(i.total_count for i in members)
        assert g.remaining_count == sum(i.remaining_count for i in members)


def test_one_sqm_group_spans_periods():
    group = next(g for g in get_inventory_grouped_by_area() if g.area_sqm == 1.0)

    # 2期 墳墓, 3期 墳墓, 3期 天空K, 4期 るり庵テラス
    assert (group.total_count, group.used_count, group.remaining_count) == (468, 452, 16)
    assert group.remaining_area_sqm == pytest.approx(16.0)


def test_area_key_is_fixed_point():
    assert area_key(2.475) == 2475
    assert area_key(0.1 + 0.2) == area_key(0.3)


def test_grouped_by_type_sorted_by_remaining():
    groups = get_inventory_grouped_by_type()
    remaining = [g.remaining_count for g in groups]

    assert len(groups) == 15
    assert remaining == sorted(remaining, reverse=True)
    assert groups[0].plot_type == "墳墓"
    assert (groups[0].total_count, groups[0].remaining_count) == (881, 196)


def test_grouped_by_type_ties_keep_first_seen_order():
    groups = [g.plot_type for g in get_inventory_grouped_by_type() if g.remaining_count == 2]
    assert groups == ["墓林千羽鶴", "天空K"]
