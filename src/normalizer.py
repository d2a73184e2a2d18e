"""Input normalization for video generation requests.

Every field of an incoming payload is optional and untrusted. `normalize`
turns it into a fully populated `GenerationRequest`; invalid or missing values
fall back to the defaults below instead of raising.
"""
import math
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_PROMPT = (
    "Anime style young man fixing a red motorcycle in a sunny street, detailed background, "
    "consistent character design, cinematic lighting"
)

VALID_ASPECT_RATIOS = ("16:9", "9:16", "1:1", "4:3")
DEFAULT_ASPECT_RATIO = "16:9"

DEFAULT_DURATION = 6
MIN_DURATION = 4
MAX_DURATION = 12


@dataclass
class GenerationPayload:
    """Request body as received. Nothing here has been validated."""

    prompt: Optional[Any] = None
    aspect_ratio: Optional[Any] = None
    duration: Optional[Any] = None

    @classmethod
    def from_json(cls, data: Any) -> "GenerationPayload":
        # Anything other than a JSON object (null, list, string, ...) is an empty payload
        if not isinstance(data, dict):
            return cls()
        return cls(
            prompt=data.get("prompt"),
            aspect_ratio=data.get("aspectRatio"),
            duration=data.get("duration"),
        )


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    aspect_ratio: str
    duration: int

    def to_provider_input(self) -> dict:
        """Map onto the field names the video model expects."""
        return {
            "prompt": self.prompt,
            "aspect_ratio": self.aspect_ratio,
            "duration": self.duration,
        }


def normalize_prompt(payload: GenerationPayload) -> str:
    if isinstance(payload.prompt, str) and payload.prompt.strip():
        return payload.prompt.strip()
    return DEFAULT_PROMPT


def normalize_aspect_ratio(payload: GenerationPayload) -> str:
    if isinstance(payload.aspect_ratio, str) and payload.aspect_ratio in VALID_ASPECT_RATIOS:
        return payload.aspect_ratio
    return DEFAULT_ASPECT_RATIO


def normalize_duration(payload: GenerationPayload) -> int:
    """Round half up, then clamp into [MIN_DURATION, MAX_DURATION].

    bool is rejected even though it subclasses int: JSON `true` is not a duration.
    """
    value = payload.duration
    if isinstance(value, bool):
        return DEFAULT_DURATION
    if isinstance(value, int):
        # JSON integers can be arbitrarily large; no float conversion for them
        rounded = value
    elif isinstance(value, float) and math.isfinite(value):
        # round() is banker's rounding in Python; 6.5 must become 7
        rounded = math.floor(value + 0.5)
    else:
        return DEFAULT_DURATION
    return max(MIN_DURATION, min(MAX_DURATION, rounded))


def normalize(payload: GenerationPayload) -> GenerationRequest:
    return GenerationRequest(
        prompt=normalize_prompt(payload),
        aspect_ratio=normalize_aspect_ratio(payload),
        duration=normalize_duration(payload),
    )
