"""
Camera Settings

Exposure guidance for photographing the aurora, looked up from the apparent
brightness at the observer's location.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from aurora_verdict.api.core.enums import ApparentBrightness


__all__ = [
    "CAMERA_SETTINGS",
    "CameraGuidance",
    "camera_guidance",
]


@dataclass(frozen=True)
class CameraGuidance:
    """Suggested camera exposure settings."""

    iso: str
    shutter: str
    aperture: str
    tip: str

    def to_dict(self) -> dict[str, Any]:
        return {"iso": self.iso, "shutter": self.shutter, "aperture": self.aperture, "tip": self.tip}


CAMERA_SETTINGS: Final[dict[ApparentBrightness, CameraGuidance]] = {
    ApparentBrightness.BRILLIANT: CameraGuidance(
        iso="800-1600",
        shutter="2-5 seconds",
        aperture="f/2.8 or wider",
        tip="Fast-moving aurora! Use shorter exposures to capture detail. May need to reduce ISO to avoid overexposure.",
    ),
    ApparentBrightness.BRIGHT: CameraGuidance(
        iso="1600-3200",
        shutter="5-10 seconds",
        aperture="f/2.8 or wider",
        tip="Great conditions for photography. Balance exposure time with aurora movement.",
    ),
    ApparentBrightness.MODERATE: CameraGuidance(
        iso="3200-6400",
        shutter="10-15 seconds",
        aperture="f/2.0 or wider",
        tip="Longer exposures will reveal colors your eye may not see clearly.",
    ),
    ApparentBrightness.FAINT: CameraGuidance(
        iso="6400-12800",
        shutter="15-25 seconds",
        aperture="f/1.8 or wider",
        tip="Push your camera settings. A fast lens is essential. Consider stacking multiple exposures.",
    ),
    ApparentBrightness.VERY_FAINT: CameraGuidance(
        iso="12800+",
        shutter="25-30 seconds",
        aperture="f/1.4 ideal",
        tip="Maximum sensitivity needed. Use the fastest lens you have. Multiple long exposures recommended.",
    ),
    ApparentBrightness.NOT_VISIBLE: CameraGuidance(
        iso="N/A",
        shutter="N/A",
        aperture="N/A",
        tip="Aurora not visible from your location with current conditions.",
    ),
}
"""Exposure settings per brightness tier."""


def camera_guidance(brightness: ApparentBrightness) -> CameraGuidance:
    return CAMERA_SETTINGS[brightness]
