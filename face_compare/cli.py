import sys
import argparse

from face_compare.errors import FaceCompareError
from face_compare.services import run_comparison
from face_compare.utils import parse_threshold
from models.aws_client import AWSClient
from config import constants


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Compare the faces in two images with Amazon Rekognition")
    ap.add_argument("--source", default=constants.SOURCE_IMAGE, help="Source face image path")
    ap.add_argument("--target", default=constants.TARGET_IMAGE, help="Target face image path")
    ap.add_argument("--threshold", default=constants.REKOGNITION_THRESHOLD,
                    help="Minimum similarity (0-100) for a face match")
    ap.add_argument("--region", default=None, help="AWS region (defaults to the environment)")
    ap.add_argument("--profile", default=None, help="AWS shared credentials profile")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        threshold = parse_threshold(args.threshold)
        client = AWSClient(region_name=args.region, profile_name=args.profile)
        similarity = run_comparison(args.source, args.target, client, threshold)
    except FaceCompareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Faces Matched!")
    print(f"Similarity Between Faces: {similarity:.2f}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
