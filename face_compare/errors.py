"""
Exceptions raised while loading images and talking to the face analysis service.

Every error derives from FaceCompareError so the CLI can catch them in one place.
"""

from typing import Optional, Any


class FaceCompareError(Exception):
    """Base exception for all face comparison errors."""

    def __init__(self, message: str = "Face comparison error occurred", details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ImageLoadError(FaceCompareError):
    """Raised when an image file cannot be opened, stat'ed or read."""

    def __init__(self, path: str, details: Optional[Any] = None):
        self.path = path
        super().__init__(f"Could not load image '{path}'", details)


class RemoteServiceError(FaceCompareError):
    """Raised when a call to the face analysis service fails."""


class NoFaceDetectedError(FaceCompareError):
    def __init__(self, message: str = "No face was detected!", details: Optional[Any] = None):
        super().__init__(message, details)


class UnmatchedFacesError(FaceCompareError):
    def __init__(self, message: str = "Unmatched Faces", details: Optional[Any] = None):
        super().__init__(message, details)


class ConfigurationError(FaceCompareError):
    """Raised when a setting from the command line or environment is invalid."""
