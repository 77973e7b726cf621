import boto3
import pytest
from botocore.stub import Stubber
from unittest.mock import patch, MagicMock

from face_compare.cli import main
from face_compare.errors import RemoteServiceError
from models.aws_client import AWSClient

FACE = {"FaceDetails": [{"Confidence": 99.9}]}
NO_FACE = {"FaceDetails": []}


@pytest.fixture
def images(tmp_path, monkeypatch):
    (tmp_path / "a.png").write_bytes(b"\x89PNG source face")
    (tmp_path / "b.png").write_bytes(b"\x89PNG target face")
    monkeypatch.chdir(tmp_path)
    return tmp_path

@pytest.fixture
def mock_client():
    with patch("face_compare.cli.AWSClient") as mock_cls:
        client = MagicMock()
        client.detect.return_value = FACE
        client.compare.return_value = {"FaceMatches": [{"Similarity": 99.87654}], "UnmatchedFaces": []}
        mock_cls.return_value = client
        yield client


def test_main_same_person(images, mock_client, capsys):
    assert main([]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Face detected Successfully!",
        "Face detected Successfully!",
        "Success!",
        "Faces Matched!",
        "Similarity Between Faces: 99.88%",
    ]
    mock_client.compare.assert_called_once_with(b"\x89PNG source face", b"\x89PNG target face", 70.0)

def test_main_custom_arguments(images, mock_client, capsys):
    (images / "left.jpg").write_bytes(b"left")
    (images / "right.jpg").write_bytes(b"right")

    with patch("face_compare.cli.AWSClient") as mock_cls:
        mock_cls.return_value = mock_client
        code = main(["--source", "left.jpg", "--target", "right.jpg", "--threshold", "85",
                     "--region", "eu-west-1", "--profile", "dev"])

    assert code == 0
    mock_cls.assert_called_once_with(region_name="eu-west-1", profile_name="dev")
    mock_client.compare.assert_called_once_with(b"left", b"right", 85.0)

def test_main_source_without_face(images, mock_client, capsys):
    mock_client.detect.return_value = NO_FACE

    assert main([]) == 1

    captured = capsys.readouterr()
    assert "No face was detected!" in captured.err
    assert "Faces Matched!" not in captured.out
    mock_client.detect.assert_called_once()
    mock_client.compare.assert_not_called()

def test_main_missing_image(tmp_path, monkeypatch, mock_client, capsys):
    monkeypatch.chdir(tmp_path)

    assert main([]) == 1
    assert "Could not load image 'a.png'" in capsys.readouterr().err
    mock_client.detect.assert_not_called()

def test_main_unmatched_faces(images, mock_client, capsys):
    mock_client.compare.return_value = {"FaceMatches": [], "UnmatchedFaces": [{"Confidence": 99.0}]}

    assert main([]) == 1
    assert "Error: Unmatched Faces" in capsys.readouterr().err

def test_main_no_faces_compared(images, mock_client, capsys):
    mock_client.compare.return_value = {"FaceMatches": [], "UnmatchedFaces": []}

    assert main([]) == 0
    assert "Similarity Between Faces: 0.00%" in capsys.readouterr().out

def test_main_client_setup_failure(images, capsys):
    with patch("face_compare.cli.AWSClient", side_effect=RemoteServiceError("Could not create Rekognition client")):
        assert main([]) == 1
    assert "Could not create Rekognition client" in capsys.readouterr().err

@pytest.mark.parametrize("threshold", ["150", "-5", "high"])
def test_main_rejects_bad_threshold(images, mock_client, capsys, threshold):
    assert main(["--threshold", threshold]) == 1

    assert "Error: Invalid similarity threshold" in capsys.readouterr().err
    mock_client.detect.assert_not_called()
    mock_client.compare.assert_not_called()

def test_main_threshold_bounds_are_inclusive(images, mock_client):
    assert main(["--threshold", "0"]) == 0
    assert main(["--threshold", "100"]) == 0

def test_main_compare_service_error(images, capsys):
    rekognition = boto3.client(
        "rekognition",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing"
    )
    with Stubber(rekognition) as stubber:
        stubber.add_response("detect_faces", FACE)
        stubber.add_response("detect_faces", FACE)
        stubber.add_client_error(
            "compare_faces",
            service_error_code="InvalidParameterException",
            service_message="Request has invalid parameters",
            http_status_code=400
        )
        with patch("face_compare.cli.AWSClient", return_value=AWSClient(rekognition=rekognition)):
            assert main([]) == 1
        stubber.assert_no_pending_responses()

    captured = capsys.readouterr()
    assert "Error: Error Comparing Faces.\nCause: " in captured.err
    assert "InvalidParameterException" in captured.err
    assert "Faces Matched!" not in captured.out
