from plot_inventory.data.plot_inventory import (
    INVENTORY_AS_OF,
    PERIOD_3_INVENTORY,
    PERIOD_3_SPECIAL_INVENTORY,
    SPECIAL_CATEGORY,
    get_all_plot_inventory,
    get_plot_inventory_by_period,
)
from plot_inventory.data.plot_inventory_by_area import (
    PERIOD_3_BY_AREA,
    PERIOD_3_SPECIAL_BY_AREA,
    get_all_plots_by_area,
    get_plots_by_area_for_period,
)
from plot_inventory.inventory.models import PERIODS


def test_all_sections_in_period_order():
    items = get_all_plot_inventory()

    assert len(items) == 39
    assert [p for p in dict.fromkeys(i.period for i in items)] == list(PERIODS)
    assert items[0].section == "A"
    assert items[-1].section == "るり庵テラス"


def test_section_counts_per_period():
    assert len(get_plot_inventory_by_period("1期")) == 17
    assert len(get_plot_inventory_by_period("2期")) == 7
    assert len(get_plot_inventory_by_period("3期")) == 4
    assert len(get_plot_inventory_by_period("4期")) == 11


def test_period_3_appends_woodland_and_sky_sections():
    items = get_plot_inventory_by_period("3期")

    assert [i.section for i in items] == ["10", "11", "樹林", "天空K"]
    assert items[:2] == list(PERIOD_3_INVENTORY)
    assert items[2:] == list(PERIOD_3_SPECIAL_INVENTORY)
    assert all(i.category == SPECIAL_CATEGORY for i in items[2:])
    assert all(i.category is None for i in items[:2])


def test_special_sections_follow_standard_period_3_in_full_listing():
    sections = [i.section for i in get_all_plot_inventory() if i.period == "3期"]
    assert sections == ["10", "11", "樹林", "天空K"]


def test_unknown_period_is_empty():
    assert get_plot_inventory_by_period("5期") == []
    assert get_plot_inventory_by_period("") == []
    assert get_plots_by_area_for_period("5期") == []


def test_accessors_return_fresh_lists():
    first = get_plot_inventory_by_period("1期")
    first.clear()

    assert len(get_plot_inventory_by_period("1期")) == 17
    assert get_all_plot_inventory() is not get_all_plot_inventory()


def test_area_records_in_period_order():
    items = get_all_plots_by_area()

    assert len(items) == 63
    assert [p for p in dict.fromkeys(i.period for i in items)] == list(PERIODS)


def test_area_period_3_appends_special_rows():
    items = get_plots_by_area_for_period("3期")

    assert items == list(PERIOD_3_BY_AREA) + list(PERIOD_3_SPECIAL_BY_AREA)
    assert [i.plot_type for i in items[-2:]] == ["樹林", "天空K"]


def test_recorded_discrepancies_are_preserved():
    row = next(i for i in get_all_plots_by_area() if i.period == "1期" and i.area_sqm == 2.16)

    # 12 used + 3 remaining out of 5 total, kept as recorded
    assert (row.total_count, row.used_count, row.remaining_count) == (5, 12, 3)


def test_as_of_label():
    assert INVENTORY_AS_OF == "2025年6月末"
