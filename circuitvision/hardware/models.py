"""
Records produced by the hardware analysis: pin declarations, findings, reports
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


SEVERITIES = ("critical", "warning", "info")
DECLARATION_KINDS = ("macro", "constant")


@dataclass(frozen=True)
class PinDeclaration:
    name: str
    pin: str
    declaration_kind: str

    def __post_init__(self):
        if self.declaration_kind not in DECLARATION_KINDS:
            raise ValueError(f"Unknown declaration kind: {self.declaration_kind}")

    def to_dict(self) -> Dict:
        return {"name": self.name, "pin": self.pin, "declarationKind": self.declaration_kind}


@dataclass(frozen=True)
class Finding:
    """A single detected hardware issue with its suggested fix."""
    severity: str
    kind: str
    description: str
    location: str
    suggestion: str

    def __post_init__(self):
        if self.severity not in SEVERITIES:
            raise ValueError(f"Unknown severity: {self.severity}")

    def to_dict(self) -> Dict:
        return {
            "severity": self.severity,
            "type": self.kind,
            "description": self.description,
            "location": self.location,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class AnalysisStats:
    total: int
    critical: int
    warnings: int
    info: int

    @classmethod
    def from_findings(cls, findings: List[Finding]) -> "AnalysisStats":
        return cls(
            total=len(findings),
            critical=sum(1 for f in findings if f.severity == "critical"),
            warnings=sum(1 for f in findings if f.severity == "warning"),
            info=sum(1 for f in findings if f.severity == "info"),
        )

    def to_dict(self) -> Dict:
        return {"total": self.total, "critical": self.critical, "warnings": self.warnings, "info": self.info}


@dataclass(frozen=True)
class AnalysisReport:
    """Findings of one analysis run, in rule execution order."""
    findings: Tuple[Finding, ...]
    stats: AnalysisStats
    pins: Tuple[PinDeclaration, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return self.stats.critical == 0

    def by_severity(self, severity: str) -> List[Finding]:
        return [f for f in self.findings if f.severity == severity]

    def to_dict(self) -> Dict:
        return {
            "findings": [f.to_dict() for f in self.findings],
            "stats": self.stats.to_dict(),
            "pins": [p.to_dict() for p in self.pins],
            "isValid": self.is_valid,
        }
