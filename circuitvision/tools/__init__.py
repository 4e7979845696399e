"""
Tools module - LangChain tools over the analysis engines
"""

from .hardware_analysis import hardware_analysis_tool, hardware_analysis_fn
from .component_lookup import component_lookup_tool
from .platform_detection import platform_detection_tool
from .mermaid_sanitizer import mermaid_sanitizer_tool
from .shopping_list import shopping_list_tool


def get_all_tools():
    """Return all available tools for an agent"""
    return [
        hardware_analysis_tool,
        component_lookup_tool,
        platform_detection_tool,
        mermaid_sanitizer_tool,
        shopping_list_tool,
    ]


__all__ = [
    "get_all_tools",
    "hardware_analysis_tool",
    "hardware_analysis_fn",
    "component_lookup_tool",
    "platform_detection_tool",
    "mermaid_sanitizer_tool",
    "shopping_list_tool",
]
