"""Unit tests for the Vision OCR service."""

import base64
import unittest
from unittest.mock import Mock, patch

import requests

from answer_grader.config import Config
from answer_grader.exceptions import OCRServiceError, ValidationError
from answer_grader.services.ocr_service import OCRService


def _response(status_code=200, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    return response


class TestOCRService(unittest.TestCase):
    """Test cases for OCRService."""

    def setUp(self):
        """Set up test fixtures."""
        self.service = OCRService(
            api_key="test_api_key",
            base_url="https://vision.test/v1/images:annotate",
            timeout=5,
        )

    def test_from_config(self):
        config = Config(vision_api_key="abc", vision_api_url="https://x.test", ocr_timeout=12)
        service = OCRService.from_config(config)

        self.assertEqual(service.api_key, "abc")
        self.assertEqual(service.base_url, "https://x.test")
        self.assertEqual(service.timeout, 12)

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_extract_text_success(self, mock_post):
        mock_post.return_value = _response(
            payload={"responses": [{"fullTextAnnotation": {"text": "1. Paris\n2. London\n"}}]}
        )

        text = self.service.extract_text(b"image-bytes")

        self.assertEqual(text, "1. Paris\n2. London\n")
        _, kwargs = mock_post.call_args
        self.assertEqual(kwargs["params"], {"key": "test_api_key"})
        self.assertEqual(kwargs["timeout"], 5)
        request = kwargs["json"]["requests"][0]
        self.assertEqual(request["features"], [{"type": "DOCUMENT_TEXT_DETECTION"}])
        self.assertEqual(base64.b64decode(request["image"]["content"]), b"image-bytes")

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_no_text_detected(self, mock_post):
        mock_post.return_value = _response(payload={"responses": [{}]})
        self.assertEqual(self.service.extract_text(b"blank"), "")

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_empty_responses(self, mock_post):
        mock_post.return_value = _response(payload={})
        self.assertEqual(self.service.extract_text(b"blank"), "")

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_http_error(self, mock_post):
        mock_post.return_value = _response(status_code=403, text="forbidden")

        with self.assertRaises(OCRServiceError) as ctx:
            self.service.extract_text(b"image")

        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.http_status, 502)

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_api_error_object(self, mock_post):
        mock_post.return_value = _response(
            payload={"responses": [{"error": {"code": 3, "message": "Bad image data."}}]}
        )

        with self.assertRaises(OCRServiceError) as ctx:
            self.service.extract_text(b"image")

        self.assertIn("Bad image data.", ctx.exception.message)

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_invalid_json(self, mock_post):
        response = _response()
        response.json.side_effect = ValueError("not json")
        mock_post.return_value = response

        with self.assertRaises(OCRServiceError):
            self.service.extract_text(b"image")

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_connection_error(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError("unreachable")

        with self.assertRaises(OCRServiceError) as ctx:
            self.service.extract_text(b"image")

        self.assertIsInstance(ctx.exception.original_error, requests.exceptions.ConnectionError)

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_timeout(self, mock_post):
        mock_post.side_effect = requests.exceptions.Timeout()

        with self.assertRaises(OCRServiceError) as ctx:
            self.service.extract_text(b"image")

        self.assertIn("timed out", ctx.exception.message)
        mock_post.assert_called_once()

    @patch("answer_grader.services.ocr_service.requests.post")
    def test_missing_api_key(self, mock_post):
        service = OCRService(api_key=None)

        self.assertFalse(service.is_available())
        with self.assertRaises(OCRServiceError):
            service.extract_text(b"image")
        mock_post.assert_not_called()

    def test_empty_image(self):
        with self.assertRaises(ValidationError):
            self.service.extract_text(b"")


if __name__ == "__main__":
    unittest.main()
