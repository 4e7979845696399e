"""
Component extractor - detects known parts in source code
"""

import logging
import re
from typing import List, Sequence, Tuple

from .catalog import COMPONENT_PATTERNS, MAX_QUANTITY

logger = logging.getLogger(__name__)


def extract_components(code: str, patterns: Sequence[Tuple[re.Pattern, str]] = COMPONENT_PATTERNS) -> List[str]:
    """Return canonical component names found in the code, in catalog order, without duplicates."""
    if not code:
        return []

    components = []
    for regex, component in patterns:
        if component not in components and regex.search(code):
            components.append(component)

    logger.debug("Detected components: %s", components)
    return components


def estimate_quantity(code: str, component: str) -> int:
    """Count occurrences of the canonical name, between 1 and MAX_QUANTITY.

    A part detected only through a synonym still counts as one unit.
    """
    if not code or not component:
        return 1
    occurrences = len(re.findall(re.escape(component), code, re.IGNORECASE))
    return max(1, min(occurrences, MAX_QUANTITY))
