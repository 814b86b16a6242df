"""Static catalog of sidebar menu entries the console can toggle."""

from dataclasses import asdict, dataclass
from typing import Iterable


@dataclass(frozen=True)
class MenuItem:
    id: str
    name: str
    icon: str
    href: str
    category: str
    description: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


CATEGORY_NAMES: dict[str, str] = {
    "sales": "営業管理",
    "customer": "顧客管理",
    "inventory": "在庫・発注管理",
    "finance": "財務管理",
    "pdca": "PDCA管理",
    "document": "ドキュメント管理",
    "other": "その他",
}

# Display order of categories; anything unlisted goes last
CATEGORY_ORDER: list[str] = [
    "inventory",
    "finance",
    "sales",
    "customer",
    "pdca",
    "document",
    "other",
]

AVAILABLE_MENU_ITEMS: tuple[MenuItem, ...] = (
    # inventory
    MenuItem("inventory-management", "在庫管理", "📦", "/inventory", "inventory", "在庫情報の管理"),
    MenuItem("purchase-management", "発注管理", "🛒", "/purchases", "inventory", "発注情報の管理"),
    MenuItem("sales-orders", "受注管理", "📋", "/sales/orders", "inventory", "受注情報の管理"),
    # finance
    MenuItem("billing-management", "請求管理", "💳", "/billing", "finance", "請求書の作成・管理"),
    MenuItem("expense-management", "経費管理", "📊", "/expenses", "finance", "経費の記録・管理"),
    MenuItem("sales-quotes", "見積管理", "💰", "/sales/quotes", "finance", "見積書の作成・管理"),
    # sales
    MenuItem("sales-opportunity", "商談管理", "🤝", "/sales/opportunities", "sales", "営業案件・商談の進捗管理"),
    MenuItem("sales-lead", "見込み客管理", "🎯", "/sales/leads", "sales", "リード・見込み客の管理"),
    MenuItem("sales-activity", "営業活動管理", "📞", "/sales/activities", "sales", "訪問記録・営業活動の記録"),
    # customer
    MenuItem("customer-management", "顧客管理", "👥", "/customers", "customer", "顧客情報・取引履歴の管理"),
    # pdca
    MenuItem("pdca-plan", "計画管理", "📝", "/pdca/plan", "pdca", "PDCAの計画フェーズ"),
    MenuItem("pdca-do", "実行管理", "⚡", "/pdca/do", "pdca", "PDCAの実行フェーズ"),
    MenuItem("pdca-check", "評価管理", "📈", "/pdca/check", "pdca", "PDCAの評価フェーズ"),
    MenuItem("pdca-action", "改善管理", "🔧", "/pdca/action", "pdca", "PDCAの改善フェーズ"),
    # document
    MenuItem("template-management", "テンプレート管理", "📄", "/templates", "document", "文書テンプレートの管理"),
    MenuItem("minutes-management", "議事録管理", "📝", "/minutes", "document", "会議の議事録管理"),
    MenuItem("document-management", "ドキュメント管理", "📚", "/documents", "document", "各種ドキュメントの管理"),
    # other
    MenuItem("calendar", "カレンダー", "📅", "/calendar", "other", "スケジュール管理"),
    MenuItem("reports", "レポート", "📊", "/reports", "other", "各種レポートの表示"),
    MenuItem("analytics", "分析ダッシュボード", "📈", "/analytics", "other", "データ分析と可視化"),
)

_ITEMS_BY_ID = {item.id: item for item in AVAILABLE_MENU_ITEMS}


def group_by_category(items: Iterable[MenuItem]) -> dict[str, list[MenuItem]]:
    """Group items by category, keeping first-seen order inside each group."""
    grouped: dict[str, list[MenuItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def group_by_category_ordered(
    items: Iterable[MenuItem],
) -> list[tuple[str, list[MenuItem]]]:
    """Group items, then order groups by CATEGORY_ORDER.

    Categories missing from CATEGORY_ORDER follow in first-seen order.
    """
    grouped = group_by_category(items)
    ordered = [
        (category, grouped[category])
        for category in CATEGORY_ORDER
        if grouped.get(category)
    ]
    ordered.extend(
        (category, group)
        for category, group in grouped.items()
        if category not in CATEGORY_ORDER
    )
    return ordered


def toggle_menu_item(enabled_menu_items: list[str], item_id: str) -> list[str]:
    """Remove item_id if enabled, otherwise append it. Returns a new list."""
    if item_id in enabled_menu_items:
        return [enabled_id for enabled_id in enabled_menu_items if enabled_id != item_id]
    return [*enabled_menu_items, item_id]


def get_menu_item(item_id: str) -> MenuItem | None:
    return _ITEMS_BY_ID.get(item_id)


def resolve_menu_items(item_ids: Iterable[str]) -> list[MenuItem]:
    """Catalog entries for the given ids; unknown ids are skipped."""
    return [_ITEMS_BY_ID[item_id] for item_id in item_ids if item_id in _ITEMS_BY_ID]


def catalog_as_dicts() -> list[dict]:
    return [item.to_dict() for item in AVAILABLE_MENU_ITEMS]
