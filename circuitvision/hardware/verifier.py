"""
Hardware constraint verifier - runs every rule and assembles the report
"""

import logging
from typing import Dict, Iterable, List, Optional

from .models import AnalysisReport, AnalysisStats, Finding
from .pins import extract_pin_declarations
from .rules import DEFAULT_ENGINE, HardwareRuleEngine

logger = logging.getLogger(__name__)


def analyze_hardware_code(
    code: str,
    components: Optional[Iterable[str]] = None,
    engine: Optional[HardwareRuleEngine] = None,
) -> AnalysisReport:
    """Extract pins once, then run the six checks in a fixed order.

    Findings are concatenated in rule order (pin conflicts, restricted pins,
    voltage, I2C bus, timing, credentials). The same input always yields the
    same report.
    """
    engine = engine or DEFAULT_ENGINE
    code = code or ""
    components = list(components) if components else []
    pins = extract_pin_declarations(code)

    findings: List[Finding] = []
    findings.extend(engine.detect_pin_conflicts(pins))
    findings.extend(engine.detect_restricted_pins(pins))
    findings.extend(engine.detect_voltage_issues(code, components))
    findings.extend(engine.detect_bus_conflicts(code, pins))
    findings.extend(engine.detect_timing_issues(code))
    findings.extend(engine.detect_hardcoded_credentials(code))

    stats = AnalysisStats.from_findings(findings)
    logger.info("Hardware analysis: %s", stats.to_dict())

    return AnalysisReport(findings=tuple(findings), stats=stats, pins=tuple(pins))


def hardware_constraint_verifier(code: str, platform: str = "ESP32", components: Optional[Iterable[str]] = None) -> Dict:
    """Check code for pin conflicts and platform constraints, as a plain dict."""
    engine = HardwareRuleEngine(platform=platform or "ESP32")
    return analyze_hardware_code(code, components, engine).to_dict()


def generate_bug_report(report: AnalysisReport) -> str:
    """Render the findings as a markdown report grouped by severity."""
    if not report.findings:
        return "✅ **No problems detected** - the code looks correct!"

    stats = report.stats
    lines = [f"## 🔍 Hardware Analysis - {stats.total} issue(s) detected", ""]

    if stats.critical:
        lines += [f"### ❌ CRITICAL ({stats.critical})", ""]
        for finding in report.by_severity("critical"):
            lines.append(f"- **{finding.kind}**: {finding.description}")
            lines.append(f"  - 📍 {finding.location}")
            lines.append(f"  - 💡 {finding.suggestion}")
            lines.append("")

    if stats.warnings:
        lines += [f"### ⚠️ WARNINGS ({stats.warnings})", ""]
        for finding in report.by_severity("warning"):
            lines.append(f"- **{finding.kind}**: {finding.description}")
            lines.append(f"  - 💡 {finding.suggestion}")
            lines.append("")

    if stats.info:
        lines += [f"### ℹ️ INFORMATION ({stats.info})", ""]
        for finding in report.by_severity("info"):
            lines.append(f"- {finding.description}")
            lines.append(f"  - 💡 {finding.suggestion}")
            lines.append("")

    return "\n".join(lines)
