"""
Input size guard shared by the tools
"""

from typing import Optional

from ..config import get_settings


def source_size_error(text: str) -> Optional[str]:
    """Error message when the text exceeds CIRCUITVISION_MAX_SOURCE_CHARS, else None."""
    limit = get_settings().max_source_chars
    if len(text) > limit:
        return f"Source too large ({len(text)} > {limit} chars)"
    return None
