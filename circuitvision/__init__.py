"""
CircuitVision - deterministic analysis of hardware project sources
"""

from .components import estimate_quantity, extract_components
from .diagrams import fallback_diagram, sanitize_mermaid
from .hardware import analyze_hardware_code, generate_bug_report
from .platforms import detect_platform_type

__version__ = "0.1.0"

__all__ = [
    "analyze_hardware_code",
    "generate_bug_report",
    "extract_components",
    "estimate_quantity",
    "detect_platform_type",
    "sanitize_mermaid",
    "fallback_diagram",
]
