"""
Platforms module - platform detection and per-platform analyzers
"""

from .adapters import (
    analyze_fpga,
    analyze_kicad_pcb,
    analyze_multi_platform,
    analyze_raspberry_pi,
    generate_platform_doc_template,
    get_platform_support,
)
from .detector import PlatformDetection, detect_platform_type, score_platforms

__all__ = [
    "PlatformDetection",
    "detect_platform_type",
    "score_platforms",
    "analyze_raspberry_pi",
    "analyze_kicad_pcb",
    "analyze_fpga",
    "analyze_multi_platform",
    "generate_platform_doc_template",
    "get_platform_support",
]
