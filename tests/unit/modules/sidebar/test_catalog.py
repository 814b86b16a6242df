import pytest

from src.modules.sidebar.catalog import (
    AVAILABLE_MENU_ITEMS,
    CATEGORY_NAMES,
    CATEGORY_ORDER,
    MenuItem,
    get_menu_item,
    group_by_category,
    group_by_category_ordered,
    resolve_menu_items,
    toggle_menu_item,
)


def item(item_id: str, category: str) -> MenuItem:
    return MenuItem(item_id, item_id, "*", f"/{item_id}", category)


def test_catalog_ids_are_unique_and_categorized():
    ids = [menu_item.id for menu_item in AVAILABLE_MENU_ITEMS]

    assert len(ids) == 20
    assert len(set(ids)) == len(ids)
    assert {menu_item.category for menu_item in AVAILABLE_MENU_ITEMS} <= set(CATEGORY_ORDER)
    assert set(CATEGORY_NAMES) == set(CATEGORY_ORDER)


def test_group_by_category_keeps_first_seen_order():
    items = [item("a", "other"), item("b", "sales"), item("c", "other")]

    grouped = group_by_category(items)

    assert list(grouped) == ["other", "sales"]
    assert [menu_item.id for menu_item in grouped["other"]] == ["a", "c"]


def test_ordered_groups_follow_category_order():
    items = [item("a", "other"), item("b", "sales"), item("c", "inventory")]

    ordered = group_by_category_ordered(items)

    assert [category for category, _ in ordered] == ["inventory", "sales", "other"]


def test_unknown_categories_follow_in_first_seen_order():
    items = [item("a", "zeta"), item("b", "other"), item("c", "alpha")]

    ordered = group_by_category_ordered(items)

    assert [category for category, _ in ordered] == ["other", "zeta", "alpha"]


def test_full_catalog_groups_skip_nothing_and_put_sales_before_other():
    ordered = group_by_category_ordered(AVAILABLE_MENU_ITEMS)
    categories = [category for category, _ in ordered]

    assert categories == CATEGORY_ORDER
    assert categories.index("sales") < categories.index("other")
    assert sum(len(group) for _, group in ordered) == len(AVAILABLE_MENU_ITEMS)


def test_toggle_appends_then_removes():
    enabled = ["calendar"]

    toggled = toggle_menu_item(enabled, "reports")

    assert toggled == ["calendar", "reports"]
    assert enabled == ["calendar"]
    assert toggle_menu_item(toggled, "reports") == ["calendar"]


@pytest.mark.parametrize("item_id", ["calendar", "inventory-management", "unknown"])
def test_toggle_is_an_involution(item_id):
    enabled = ["calendar", "pdca-do"]

    assert set(toggle_menu_item(toggle_menu_item(enabled, item_id), item_id)) == set(
        enabled
    )


def test_lookup_and_resolution():
    assert get_menu_item("calendar").href == "/calendar"
    assert get_menu_item("missing") is None
    assert [menu_item.id for menu_item in resolve_menu_items(["reports", "missing", "calendar"])] == [
        "reports",
        "calendar",
    ]


def test_menu_item_serializes_every_field():
    assert get_menu_item("analytics").to_dict() == {
        "id": "analytics",
        "name": "分析ダッシュボード",
        "icon": "📈",
        "href": "/analytics",
        "category": "other",
        "description": "データ分析と可視化",
    }
