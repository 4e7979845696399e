"""
Mermaid utilities - extraction from markdown, syntax repair and fallback diagram
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

DIAGRAM_TYPES = (
    "graph",
    "flowchart",
    "sequenceDiagram",
    "classDiagram",
    "stateDiagram",
    "erDiagram",
    "gantt",
    "pie",
)

MERMAID_BLOCK = re.compile(r'```mermaid\s*([\s\S]+?)```')
CODE_FENCE = re.compile(r'`{3,}(?:mermaid\b)?[ \t]*', re.IGNORECASE)

# An outer label whose content holds only flat bracket groups, on one line
NESTED_LABEL = re.compile(r'\[([^\[\]\n]*(?:\[[^\[\]\n]*\][^\[\]\n]*)+)\]')
ADJACENT_LABELS = re.compile(r'\[([^\[\]\n]*)\]\[([^\[\]\n]*)\]')
UNDERSCORE_LABEL = re.compile(r'\[([^\[\]\n]*_[^\[\]\n]*)\]')
BRACKET_SPLIT = re.compile(r'[\[\]]')

BROKEN_COMBINATIONS = (
    (re.compile(r'\["\)'), '"]'),
    (re.compile(r'\)\][ \t]*-->'), ']-->'),
    (re.compile(r'\)\]([ \t]*\[)'), r']\1'),
    (re.compile(r'\]\]+'), ']'),
)

EDGE_LABELS = (
    (re.compile(r'-->[ \t]*\|[^|\n]*\|[ \t]*'), ' --> '),
    (re.compile(r'---[ \t]*\|[^|\n]*\|[ \t]*'), ' --- '),
    (re.compile(r'-\.->[ \t]*\|[^|\n]*\|[ \t]*'), ' -.-> '),
    (re.compile(r'==>[ \t]*\|[^|\n]*\|[ \t]*'), ' ==> '),
)

NOTE_DIRECTIVE = re.compile(r'^[ \t]*note\s+(?:left|right|over|below)\s+of\s+\w+.*$', re.MULTILINE)

MIN_PASSES = 8


def extract_mermaid(response: str) -> Optional[str]:
    """Extract the first Mermaid.js block from a markdown response"""
    if not response or not isinstance(response, str):
        return None
    match = MERMAID_BLOCK.search(response)
    if match:
        return match.group(1).strip()
    return None


def _scrub(label: str) -> str:
    label = re.sub(r'[^a-zA-Z0-9_]', '_', label)
    return re.sub(r'_+', '_', label).strip('_')


def _join_segments(*segments: str) -> str:
    return _scrub("_".join(s for s in segments if s))


def _is_comment(line: str) -> bool:
    return line.strip().startswith("%%")


def has_diagram_type(code: str) -> bool:
    """True when the first non-comment line declares a known diagram type."""
    for line in code.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("%%"):
            continue
        return stripped.startswith(DIAGRAM_TYPES)
    return False


def _strip_layout(code: str) -> str:
    code = "\n".join(line.rstrip() for line in code.split("\n"))
    return code.strip()


def _collapse_nested(code: str, max_passes: int) -> Optional[str]:
    def flatten(match):
        segments = BRACKET_SPLIT.split(match.group(1))
        return f"[{_join_segments(*segments)}]"

    for _ in range(max_passes):
        collapsed = NESTED_LABEL.sub(flatten, code)
        if collapsed == code:
            return code
        code = collapsed
    return None


def _merge_adjacent(code: str) -> str:
    previous = None
    while code != previous:
        previous = code
        code = ADJACENT_LABELS.sub(lambda m: f"[{_join_segments(m.group(1), m.group(2))}]", code)
    return code


def _balance_line(line: str) -> str:
    depth = 0
    kept = []
    for char in line:
        if char == "[":
            depth += 1
        elif char == "]":
            if depth == 0:
                continue
            depth -= 1
        kept.append(char)
    return "".join(kept) + "]" * depth


def _balance_brackets(code: str) -> str:
    lines = []
    for line in code.split("\n"):
        trimmed = line.strip()
        if "[" in line or "]" in line:
            line = _balance_line(line)
            trimmed = line.strip()
        if not _is_comment(line) and ("-->" in trimmed or "---" in trimmed or "[" in trimmed):
            line = trimmed
        lines.append(line)
    return "\n".join(lines)


def _drop_edge_labels(code: str) -> str:
    # Patterns start at the arrow; blanks before it are trimmed separately
    for pattern, arrow in EDGE_LABELS:
        parts = pattern.split(code)
        if len(parts) > 1:
            code = arrow.join([part.rstrip(" \t") for part in parts[:-1]] + parts[-1:])
    return code


def _repair_pass(code: str, max_passes: int) -> Optional[str]:
    code = _collapse_nested(code, max_passes)
    if code is None:
        return None

    for pattern, replacement in BROKEN_COMBINATIONS:
        code = pattern.sub(replacement, code)
    code = UNDERSCORE_LABEL.sub(lambda m: f"[{_scrub(m.group(1))}]", code)
    code = _merge_adjacent(code)

    code = _drop_edge_labels(code)
    code = NOTE_DIRECTIVE.sub("", code)

    code = _balance_brackets(code)
    code = re.sub(r'_+', '_', code)
    return _strip_layout(code)


def sanitize_mermaid(raw: str) -> Optional[str]:
    """Repair common Mermaid syntax defects in generated diagram text.

    Returns the cleaned diagram, or None when the text is not a recognizable
    diagram or cannot be repaired within the pass limit. Never raises; the
    caller should substitute `fallback_diagram()` on None. Applying it to its
    own output returns the same text.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None

    code = _strip_layout(CODE_FENCE.sub("", raw))
    if not has_diagram_type(code):
        logger.debug("Rejected diagram without a known type declaration")
        return None

    max_passes = MIN_PASSES + code.count("[") + code.count("]")
    for _ in range(max_passes):
        repaired = _repair_pass(code, max_passes)
        if repaired is None:
            break
        if repaired == code:
            if not code or not has_diagram_type(code):
                return None
            return code
        code = repaired

    logger.warning("Mermaid repair did not converge after %d passes", max_passes)
    return None


def fallback_diagram(error_message: str = "") -> str:
    """Minimal two-node diagram shown in place of an unrepairable one"""
    detail = " ".join(str(error_message or "unknown error").split())[:100]
    return (
        "flowchart TD\n"
        '    Error["Invalid diagram"]\n'
        '    Message["The generated Mermaid code contains errors"]\n'
        "\n"
        "    Error --> Message\n"
        "\n"
        f"    %% Error: {detail}"
    )


def sanitize_or_fallback(raw: str, error_message: str = "Could not repair diagram") -> str:
    cleaned = sanitize_mermaid(raw)
    if cleaned is None:
        return fallback_diagram(error_message)
    return cleaned
