"""
Mermaid repair tool
"""

from typing import Dict

from langchain_core.tools import tool

from ..diagrams import extract_mermaid, fallback_diagram, sanitize_mermaid
from .limits import source_size_error


@tool
def mermaid_sanitizer_tool(diagram: str) -> Dict:
    """Repair Mermaid wiring diagram syntax; returns a fallback diagram when it cannot be fixed"""
    try:
        error = source_size_error(diagram)
        if error:
            return {"success": False, "repaired": False, "error": error, "diagram": fallback_diagram(error)}

        source = extract_mermaid(diagram) or diagram
        cleaned = sanitize_mermaid(source)
        if cleaned is None:
            return {"success": False, "repaired": False, "diagram": fallback_diagram("Could not repair diagram")}
        return {"success": True, "repaired": cleaned != source.strip(), "diagram": cleaned}
    except Exception as e:
        return {"success": False, "repaired": False, "error": str(e), "diagram": fallback_diagram(str(e))}
