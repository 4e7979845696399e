"""
Offline shopping list built from detected components
"""

import logging
from typing import Dict, List
from urllib.parse import quote_plus

from .catalog import DEFAULT_ALTERNATIVES, FALLBACK_PRICES
from .extractor import estimate_quantity, extract_components

logger = logging.getLogger(__name__)

LABELS = {
    "en": {
        "title": "## 🛒 Shopping List",
        "component": "Component",
        "quantity": "Qty",
        "price": "Price (USD)",
        "links": "Purchase Links",
        "alternatives": "Alternatives",
        "total": "Total Estimate",
        "note": "> 💡 Indicative prices - check availability and shipping costs",
        "empty": "No components detected",
    },
    "fr": {
        "title": "## 🛒 Liste de Courses",
        "component": "Composant",
        "quantity": "Qté",
        "price": "Prix (USD)",
        "links": "Liens d'Achat",
        "alternatives": "Alternatives",
        "total": "Total Estimé",
        "note": "> 💡 Prix indicatifs - vérifiez la disponibilité et les frais de port",
        "empty": "Aucun composant détecté",
    },
}


def _labels(language: str) -> Dict[str, str]:
    return LABELS.get(language, LABELS["en"])


def _price(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def get_default_alternatives(component: str) -> List[str]:
    return list(DEFAULT_ALTERNATIVES.get(component, ()))


def get_fallback_prices(components: List[str]) -> Dict:
    """Price every component from the static table, or point to a web search."""
    items = []
    for component in components:
        entry = FALLBACK_PRICES.get(component)
        if entry:
            price = entry["price"]
            vendors = [dict(v) for v in entry["vendors"]]
        else:
            price = "Check manually"
            vendors = [{
                "name": "Google",
                "price": "N/A",
                "url": f"https://www.google.com/search?q={quote_plus(component + ' price')}",
            }]
        items.append({
            "component": component,
            "price_usd": price,
            "vendors": vendors,
            "alternatives": get_default_alternatives(component),
        })

    return {"success": False, "items": items, "error": "Using fallback prices"}


def generate_shopping_markdown(items: List[Dict], language: str = "en") -> str:
    """Markdown table of components, prices, links and alternatives."""
    if not items:
        return ""

    labels = _labels(language)
    markdown = f"{labels['title']}\n\n"
    markdown += (
        f"| {labels['component']} | {labels['quantity']} | {labels['price']} "
        f"| {labels['links']} | {labels['alternatives']} |\n"
    )
    markdown += "|-----------|-----|-------------|----------------|---------------|\n"

    total = 0.0
    for item in items:
        quantity = item.get("quantity", 1)
        total += _price(item.get("price_usd")) * quantity

        vendors = item.get("vendors") or []
        if vendors:
            links = " • ".join(f"[{v['name']} (${v['price']})]({v['url']})" for v in vendors[:2])
        else:
            links = f"🔍 [Search](https://www.google.com/search?q={quote_plus(item['component'] + ' buy')})"
        alternatives = ", ".join(item.get("alternatives", [])[:2]) or "-"

        markdown += f"| **{item['component']}** | {quantity} | **${item['price_usd']}** | {links} | {alternatives} |\n"

    if total > 0:
        markdown += f"\n**💰 {labels['total']}: ~${total:.2f}**\n\n"

    markdown += f"{labels['note']}\n"
    return markdown


def generate_shopping_list(code: str, language: str = "en") -> Dict:
    """Extract components from code and build the priced shopping list."""
    components = extract_components(code)
    if not components:
        return {"success": False, "message": _labels(language)["empty"], "items": []}

    items = get_fallback_prices(components)["items"]
    for item in items:
        item["quantity"] = estimate_quantity(code, item["component"])

    total = sum(_price(item["price_usd"]) * item["quantity"] for item in items)
    logger.info("Shopping list: %d items, $%.2f total", len(items), total)

    return {
        "success": True,
        "markdown": generate_shopping_markdown(items, language),
        "items": items,
        "totalComponents": len(components),
        "totalEstimate": f"{total:.2f}",
    }
