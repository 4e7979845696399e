"""
Components module - part detection and shopping lists
"""

from .extractor import estimate_quantity, extract_components
from .shopping import generate_shopping_list, generate_shopping_markdown, get_fallback_prices

__all__ = [
    "extract_components",
    "estimate_quantity",
    "generate_shopping_list",
    "generate_shopping_markdown",
    "get_fallback_prices",
]
