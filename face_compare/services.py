from face_compare.errors import (
    RemoteServiceError, NoFaceDetectedError, UnmatchedFacesError
)
from face_compare.utils import load_image
from models.face_analysis_client import FaceAnalysisClient
from config.constants import DEFAULT_THRESHOLD


def detect_face(image: bytes, client: FaceAnalysisClient):
    if not image:
        raise NoFaceDetectedError(details="image is empty")

    try:
        result = client.detect(image)
    except RemoteServiceError as e:
        raise RemoteServiceError(f"Failed to detect faces!\nCause of error: {e}") from e

    if len(result.get("FaceDetails", [])) == 0:
        raise NoFaceDetectedError()

    print("Face detected Successfully!")


def compare_faces(source: bytes, target: bytes, client: FaceAnalysisClient,
                  threshold: float = DEFAULT_THRESHOLD) -> float:
    # a failed call is held until we know there is no match
    error, cause = None, None
    try:
        result = client.compare(source, target, threshold)
    except RemoteServiceError as e:
        error = RemoteServiceError(f"Error Comparing Faces.\nCause: {e}")
        cause = e
        result = {}

    print("Success!")

    if len(result.get("UnmatchedFaces", [])) > 0:
        error, cause = UnmatchedFacesError(), None

    if len(result.get("FaceMatches", [])) > 0:
        return result["FaceMatches"][0]["Similarity"]

    if error is not None:
        raise error from cause
    return 0.0


def run_comparison(source_path: str, target_path: str, client: FaceAnalysisClient,
                   threshold: float = DEFAULT_THRESHOLD) -> float:
    source_image = load_image(source_path)
    detect_face(source_image, client)

    target_image = load_image(target_path)
    detect_face(target_image, client)

    return compare_faces(source_image, target_image, client, threshold)
