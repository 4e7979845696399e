"""
Hardware rule engine - independent heuristic checks over source code and pins
"""

import logging
import re
from typing import Iterable, List, Mapping, Optional, Sequence

from .models import Finding, PinDeclaration
from .registry import (
    CRITICAL_DELAYS,
    ESP32_RESTRICTED_PINS,
    HIGH_VOLTAGE_THRESHOLD,
    I2C_DEFAULT_PINS,
    VOLTAGE_REQUIREMENTS,
)

logger = logging.getLogger(__name__)

HIGH_VOLTAGE_PATTERN = re.compile(r'5V|VCC|Vin', re.IGNORECASE)
I2C_PATTERN = re.compile(r'Wire\.begin|I2C', re.IGNORECASE)
DHT_PATTERN = re.compile(r'DHT22|DHT11', re.IGNORECASE)
DELAY_PATTERN = re.compile(r'delay\((\d+)\)', re.IGNORECASE)

CREDENTIAL_PATTERNS = (
    (re.compile(r'const\s+char\s*\*\s*ssid\s*=\s*"([^"]+)"', re.IGNORECASE), "WiFi SSID"),
    (re.compile(r'const\s+char\s*\*\s*password\s*=\s*"([^"]+)"', re.IGNORECASE), "WiFi password"),
    (re.compile(r'const\s+char\s*\*\s*api[_-]?key\s*=\s*"([^"]+)"', re.IGNORECASE), "API key"),
)


class HardwareRuleEngine:
    """Runs the hardware checks against injectable rule tables.

    Every check is a pure function of its arguments and the tables given at
    construction; the default tables live in `registry`.
    """

    def __init__(
        self,
        platform: str = "ESP32",
        restricted_pins: Sequence[Mapping] = ESP32_RESTRICTED_PINS,
        voltage_requirements: Mapping[str, Mapping] = VOLTAGE_REQUIREMENTS,
        i2c_default_pins: Mapping[str, Mapping] = I2C_DEFAULT_PINS,
        critical_delays: Mapping[str, int] = CRITICAL_DELAYS,
    ):
        self.platform = platform
        self.restricted_pins = tuple(restricted_pins)
        self.voltage_requirements = voltage_requirements
        self.i2c_default_pins = i2c_default_pins
        self.critical_delays = critical_delays

    def detect_pin_conflicts(self, pins: Iterable[PinDeclaration]) -> List[Finding]:
        """One critical finding per declaration reusing an already claimed pin."""
        conflicts = []
        owners = {}

        for decl in pins:
            existing = owners.get(decl.pin)
            if existing is not None:
                conflicts.append(Finding(
                    severity="critical",
                    kind="pin_conflict",
                    description=f"Pin {decl.pin} used twice: {existing.name} and {decl.name}",
                    location="Multiple declarations",
                    suggestion="Use different pins or check the wiring logic",
                ))
            else:
                owners[decl.pin] = decl

        return conflicts

    def detect_restricted_pins(self, pins: Iterable[PinDeclaration], platform: Optional[str] = None) -> List[Finding]:
        platform = platform if platform is not None else self.platform
        if "ESP32" not in platform.upper():
            return []

        findings = []
        for decl in pins:
            restricted = next(
                (r for r in self.restricted_pins if r["pin"].replace("GPIO", "") in decl.pin),
                None,
            )
            if restricted is None:
                continue

            if restricted["severity"] == "critical":
                suggestion = f"Never use {decl.pin}"
            else:
                suggestion = f"Avoid {decl.pin} or add an external pull-up/pull-down resistor"
            findings.append(Finding(
                severity=restricted["severity"],
                kind="restricted_pin",
                description=f"{decl.pin} ({decl.name}): {restricted['reason']}",
                location=f"Declaration of {decl.name}",
                suggestion=suggestion,
            ))

        return findings

    def detect_voltage_issues(self, code: str, components: Optional[Iterable[str]] = None) -> List[Finding]:
        """Flag 3.3V-only parts when the code references a 5V rail."""
        if not components or not HIGH_VOLTAGE_PATTERN.search(code or ""):
            return []

        issues = []
        for component in components:
            requirement = self.voltage_requirements.get(component)
            if requirement is None:
                logger.debug("No voltage rating for %s, skipping", component)
                continue
            if requirement["max"] < HIGH_VOLTAGE_THRESHOLD:
                issues.append(Finding(
                    severity="critical",
                    kind="voltage_mismatch",
                    description=f"{component} only supports {requirement['voltage']} but the code uses 5V",
                    location=f"Component {component}",
                    suggestion="Use a voltage divider or power it from 3.3V",
                ))

        return issues

    def default_i2c_pins(self, board: Optional[str] = None) -> Optional[Mapping]:
        board = (board if board is not None else self.platform).upper()
        for key, pins in self.i2c_default_pins.items():
            if key in board:
                return pins
        return None

    def detect_bus_conflicts(self, code: str, pins: Iterable[PinDeclaration], board: Optional[str] = None) -> List[Finding]:
        if not I2C_PATTERN.search(code or ""):
            return []

        defaults = self.default_i2c_pins(board)
        if defaults is None:
            return []

        conflicts = []
        for decl in pins:
            if decl.pin not in (defaults["sda"], defaults["scl"]):
                continue
            name = decl.name.lower()
            if "sda" in name or "scl" in name:
                continue
            conflicts.append(Finding(
                severity="warning",
                kind="i2c_pin_conflict",
                description=f"{decl.pin} is the default I2C pin but is used for {decl.name}",
                location=f"Declaration of {decl.name}",
                suggestion=f"If I2C is used, move {decl.name} to another pin",
            ))

        return conflicts

    def detect_timing_issues(self, code: str) -> List[Finding]:
        if not DHT_PATTERN.search(code or ""):
            return []

        minimum = self.critical_delays["DHT_MIN_INTERVAL"]
        delays = [int(value) for value in DELAY_PATTERN.findall(code)]
        if any(d >= minimum for d in delays):
            return []

        return [Finding(
            severity="warning",
            kind="timing_issue",
            description=f"DHT22/DHT11 needs at least {minimum}ms between reads",
            location="Main loop",
            suggestion=f"Add delay({minimum}) or use millis() for an interval of at least {minimum // 1000}s",
        )]

    def detect_hardcoded_credentials(self, code: str) -> List[Finding]:
        """One info finding per credential kind found, not per occurrence."""
        return [
            Finding(
                severity="info",
                kind="security_warning",
                description=f"Hardcoded {label} found in the code",
                location="Network configuration",
                suggestion="Move it to an unversioned config.h or load it from the environment",
            )
            for pattern, label in CREDENTIAL_PATTERNS
            if pattern.search(code or "")
        ]


DEFAULT_ENGINE = HardwareRuleEngine()

detect_pin_conflicts = DEFAULT_ENGINE.detect_pin_conflicts
detect_restricted_pins = DEFAULT_ENGINE.detect_restricted_pins
detect_voltage_issues = DEFAULT_ENGINE.detect_voltage_issues
detect_bus_conflicts = DEFAULT_ENGINE.detect_bus_conflicts
detect_timing_issues = DEFAULT_ENGINE.detect_timing_issues
detect_hardcoded_credentials = DEFAULT_ENGINE.detect_hardcoded_credentials
