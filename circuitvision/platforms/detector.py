"""
Platform classifier - scores source text and file names against platform signatures
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .signatures import PLATFORM_KEYS, PLATFORM_SIGNATURES

logger = logging.getLogger(__name__)

CONFIDENCE_LEVELS = ("high", "medium", "low")
FILENAME_WEIGHT = 2
CONTENT_WEIGHT = 1


@dataclass(frozen=True)
class PlatformDetection:
    platform: str
    type: str
    confidence: str

    def __post_init__(self):
        if self.platform not in PLATFORM_KEYS:
            raise ValueError(f"Unknown platform: {self.platform}")
        if self.confidence not in CONFIDENCE_LEVELS:
            raise ValueError(f"Unknown confidence: {self.confidence}")

    @property
    def is_conclusive(self) -> bool:
        """Low confidence detections should be read as 'unknown'."""
        return self.confidence != "low"

    def to_dict(self) -> Dict:
        return {"platform": self.platform, "type": self.type, "confidence": self.confidence}


def confidence_for(score: int) -> str:
    if score > 3:
        return "high"
    if score > 1:
        return "medium"
    return "low"


def file_names(files: Optional[Iterable[Union[str, Dict]]]) -> List[str]:
    names = []
    for f in files or []:
        names.append(f.get("name", "") if isinstance(f, dict) else str(f))
    return names


def score_platforms(code: str, files=None, signatures: Sequence = PLATFORM_SIGNATURES) -> Dict[str, int]:
    """Filename hits weigh 2, content hits weigh 1; both can count for one signature."""
    code = code or ""
    names = file_names(files)
    scores = {}

    for platform, _, patterns in signatures:
        score = 0
        for pattern in patterns:
            if any(pattern.search(name) for name in names):
                score += FILENAME_WEIGHT
            if pattern.search(code):
                score += CONTENT_WEIGHT
        scores[platform] = score

    return scores


def detect_platform_type(code: str, files=None, signatures: Sequence = PLATFORM_SIGNATURES) -> PlatformDetection:
    """Return the best scoring platform; the first listed platform wins ties."""
    scores = score_platforms(code, files, signatures)
    labels = {platform: label for platform, label, _ in signatures}

    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    platform, score = ranked[0]
    logger.debug("Platform scores: %s", scores)

    return PlatformDetection(platform=platform, type=labels[platform], confidence=confidence_for(score))
