from abc import ABC
from typing import Any, Dict
from models.face_detection_service import FaceDetectionService
from models.face_comparison_service import FaceComparisonService


class FaceAnalysisClient(ABC):
    def __init__(self, detection_service: FaceDetectionService, comparison_service: FaceComparisonService):
        self.detection_service = detection_service
        self.comparison_service = comparison_service

    def detect(self, image_bytes: bytes) -> Dict[str, Any]:
        return self.detection_service.detect_faces(image_bytes)

    def compare(self, source_image: bytes, target_image: bytes, threshold: float) -> Dict[str, Any]:
        return self.comparison_service.compare_faces(source_image, target_image, threshold)
