import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from face_compare.errors import RemoteServiceError
from face_compare.utils import parse_number
from models.face_analysis_client import FaceAnalysisClient
from models.face_detection_service import FaceDetectionService
from models.face_comparison_service import FaceComparisonService
from config import constants


def create_rekognition_client(region_name=None, profile_name=None):
    config = Config(
        connect_timeout=parse_number("connect timeout", constants.CONNECT_TIMEOUT, int, minimum=1),
        read_timeout=parse_number("read timeout", constants.READ_TIMEOUT, int, minimum=1),
        retries={'total_max_attempts': parse_number("max attempts", constants.MAX_ATTEMPTS, int, minimum=1)}
    )
    try:
        session = boto3.Session(
            profile_name=profile_name or constants.AWS_PROFILE,
            region_name=region_name or constants.AWS_REGION
        )
        return session.client('rekognition', config=config)
    except BotoCoreError as e:
        raise RemoteServiceError("Could not create Rekognition client", details=str(e)) from e


class AWSFaceDetectionService(FaceDetectionService):
    def __init__(self, rekognition):
        self.rekognition = rekognition

    def detect_faces(self, image_bytes: bytes):
        try:
            return self.rekognition.detect_faces(
                Image = {'Bytes': image_bytes},
                Attributes = constants.DETECTION_ATTRIBUTES
            )
        except (BotoCoreError, ClientError) as e:
            raise RemoteServiceError(str(e)) from e


class AWSFaceComparisonService(FaceComparisonService):
    def __init__(self, rekognition):
        self.rekognition = rekognition

    def compare_faces(self, source_image: bytes, target_image: bytes, threshold: float):
        try:
            return self.rekognition.compare_faces(
                SourceImage = {'Bytes': source_image},
                TargetImage = {'Bytes': target_image},
                SimilarityThreshold = threshold
            )
        except (BotoCoreError, ClientError) as e:
            raise RemoteServiceError(str(e)) from e


class AWSClient(FaceAnalysisClient):
    def __init__(self, region_name=None, profile_name=None, rekognition=None):
        # one client serves both operations
        rekognition = rekognition or create_rekognition_client(region_name, profile_name)
        super().__init__(
            detection_service=AWSFaceDetectionService(rekognition),
            comparison_service=AWSFaceComparisonService(rekognition)
        )
