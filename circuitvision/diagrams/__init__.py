"""
Diagrams module - Mermaid extraction and repair
"""

from .mermaid import extract_mermaid, fallback_diagram, sanitize_mermaid, sanitize_or_fallback

__all__ = ["extract_mermaid", "sanitize_mermaid", "fallback_diagram", "sanitize_or_fallback"]
