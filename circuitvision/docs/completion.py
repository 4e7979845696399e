"""
Checks on generated documentation before it is published
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

MIN_DOCUMENT_LENGTH = 800
MIN_SECTIONS = 4

REQUIRED_SECTIONS = (
    re.compile(r"vue\s+d'ensemble|overview|présentation|objectif", re.IGNORECASE),
    re.compile(r"composants?\s+(?:hardware|matériel)|liste\s+des\s+composants|hardware\s+components?|components?\s+list", re.IGNORECASE),
    re.compile(r"pins?|configuration|câblage|brochage|wiring", re.IGNORECASE),
    re.compile(r"bibliothèques?|dépendances|libraries|dependencies", re.IGNORECASE),
    re.compile(r"installation|procédure|setup", re.IGNORECASE),
)
DIAGRAM_MARKERS = re.compile(r"```mermaid|schéma|diagram", re.IGNORECASE)
GITHUB_URL = re.compile(r"https://github\.com/[^\s]+")
CONTINUATION_WORDS = ("continue", "suite")


def is_documentation_complete(response: str) -> bool:
    """At least four required sections plus a diagram, in a long enough text."""
    if not response or len(response) < MIN_DOCUMENT_LENGTH:
        return False

    sections = sum(1 for regex in REQUIRED_SECTIONS if regex.search(response))
    has_diagram = bool(DIAGRAM_MARKERS.search(response))
    logger.debug("Documentation check: %d sections, diagram=%s", sections, has_diagram)

    return sections >= MIN_SECTIONS and has_diagram


def extract_github_url(user_input: str) -> Optional[str]:
    match = GITHUB_URL.search(user_input or "")
    return match.group(0) if match else None


def should_show_github_button(response: str, user_input: str, has_github_url: bool) -> bool:
    lowered = (user_input or "").lower()
    is_continuation = any(word in lowered for word in CONTINUATION_WORDS)
    return bool(has_github_url) and is_documentation_complete(response) and not is_continuation
