"""
Hardware module - pin extraction, rule engine and verification
"""

from .models import AnalysisReport, AnalysisStats, Finding, PinDeclaration
from .pins import extract_pin_declarations
from .rules import HardwareRuleEngine
from .verifier import analyze_hardware_code, generate_bug_report, hardware_constraint_verifier

__all__ = [
    "AnalysisReport",
    "AnalysisStats",
    "Finding",
    "PinDeclaration",
    "extract_pin_declarations",
    "HardwareRuleEngine",
    "analyze_hardware_code",
    "generate_bug_report",
    "hardware_constraint_verifier",
]
