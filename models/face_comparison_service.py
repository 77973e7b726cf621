from abc import ABC, abstractmethod
from typing import Any, Dict

class FaceComparisonService(ABC):
    @abstractmethod
    def compare_faces(self, source_image: bytes, target_image: bytes, threshold: float) -> Dict[str, Any]:
        pass
