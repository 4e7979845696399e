"""
Shopping list tool
"""

from langchain_core.tools import tool

from ..components import generate_shopping_list
from .limits import source_size_error


@tool
def shopping_list_tool(code: str, language: str = "en") -> str:
    """Build a priced shopping list (markdown) for the components used by the code"""
    try:
        error = source_size_error(code)
        if error:
            return f"❌ {error}"

        result = generate_shopping_list(code, language)
        if not result["success"]:
            return f"❌ {result['message']}"
        return result["markdown"]
    except Exception as e:
        return f"❌ Error: {e}"
