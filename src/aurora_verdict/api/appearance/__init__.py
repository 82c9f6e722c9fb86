"""Location-aware aurora appearance prediction."""

from aurora_verdict.api.appearance.camera import CameraGuidance, camera_guidance
from aurora_verdict.api.appearance.prediction import LocationPrediction, predict_appearance, viewing_scenario


__all__ = [
    "CameraGuidance",
    "LocationPrediction",
    "camera_guidance",
    "predict_appearance",
    "viewing_scenario",
]
