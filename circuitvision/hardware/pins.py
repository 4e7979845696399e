"""
Pin declaration extractor
"""

import re
from typing import List

from .models import PinDeclaration


MACRO_PIN_PATTERN = re.compile(r'#define\s+(\w+)\s+((?i:GPIO))?(\d+|[A-Z]\d+)')
CONSTANT_PIN_PATTERN = re.compile(r'const\s+int\s+(\w+)\s*=\s*((?i:GPIO))?(\d+)')


def _pin_reference(match: re.Match) -> str:
    prefix, number = match.group(2), match.group(3)
    return f"{prefix}{number}" if prefix else number


def extract_pin_declarations(code: str) -> List[PinDeclaration]:
    """Find `#define NAME GPIOn` and `const int NAME = n` pin bindings.

    Macro bindings come first, then typed constants, each in source order.
    Duplicate names and pins are kept; conflicts are judged by the rules.
    """
    if not code:
        return []

    pins = [
        PinDeclaration(name=m.group(1), pin=_pin_reference(m), declaration_kind="macro")
        for m in MACRO_PIN_PATTERN.finditer(code)
    ]
    pins.extend(
        PinDeclaration(name=m.group(1), pin=_pin_reference(m), declaration_kind="constant")
        for m in CONSTANT_PIN_PATTERN.finditer(code)
    )
    return pins
