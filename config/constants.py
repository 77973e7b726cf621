import os

SOURCE_IMAGE = os.environ.get("FACE_COMPARE_SOURCE", "a.png")
TARGET_IMAGE = os.environ.get("FACE_COMPARE_TARGET", "b.png")

DEFAULT_THRESHOLD = 70.0
DETECTION_ATTRIBUTES = ["DEFAULT"]

# None lets botocore fall back to its own resolution chain
AWS_REGION = os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION")
AWS_PROFILE = os.environ.get("AWS_PROFILE")

# numeric overrides stay strings here; they are parsed when used
REKOGNITION_THRESHOLD = os.environ.get("REKOGNITION_THRESHOLD", str(DEFAULT_THRESHOLD))
CONNECT_TIMEOUT = os.environ.get("REKOGNITION_CONNECT_TIMEOUT", "10")
READ_TIMEOUT = os.environ.get("REKOGNITION_READ_TIMEOUT", "30")
MAX_ATTEMPTS = os.environ.get("REKOGNITION_MAX_ATTEMPTS", "1")
