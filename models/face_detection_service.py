from abc import ABC, abstractmethod
from typing import Any, Dict

class FaceDetectionService(ABC):
    @abstractmethod
    def detect_faces(self, image_bytes: bytes) -> Dict[str, Any]:
        pass
