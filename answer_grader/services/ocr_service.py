"""
OCR Service for turning answer-sheet images into raw text using the Google
Cloud Vision ``images:annotate`` REST endpoint (document text detection).
"""

import base64
from typing import Any, Dict, Optional

import requests

from answer_grader.constants import DEFAULT_OCR_TIMEOUT, DEFAULT_VISION_API_URL
from answer_grader.exceptions import OCRServiceError, ValidationError
from answer_grader.utils.logger import logger


class OCRService:
    """OCR service that uses the Google Cloud Vision API for text extraction."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = float(DEFAULT_OCR_TIMEOUT),
    ):
        """
        Initialize with API key and endpoint URL.

        Args:
            api_key: Google Cloud Vision API key
            base_url: ``images:annotate`` endpoint URL
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url or DEFAULT_VISION_API_URL
        self.timeout = timeout
        self.headers = {"Content-Type": "application/json", "Accept": "application/json"}

        if self.api_key:
            logger.info("OCR service initialized successfully")
        else:
            logger.info("OCR service initialized without API key - service will be disabled")

    @classmethod
    def from_config(cls, config) -> "OCRService":
        return cls(
            api_key=config.vision_api_key,
            base_url=config.vision_api_url,
            timeout=config.ocr_timeout,
        )

    def is_available(self) -> bool:
        """Check whether the service is configured to make requests."""
        return bool(self.api_key and self.base_url)

    def _build_request(self, image_bytes: bytes) -> Dict[str, Any]:
        return {
            "requests": [
                {
                    "image": {"content": base64.b64encode(image_bytes).decode("ascii")},
                    "features": [{"type": "DOCUMENT_TEXT_DETECTION"}],
                }
            ]
        }

    def extract_text(self, image_bytes: bytes) -> str:
        """
        Extract text from an image.

        Args:
            image_bytes: Raw bytes of the uploaded image

        Returns:
            str: Full transcript, or an empty string when no text was detected

        Raises:
            ValidationError: If the image is empty
            OCRServiceError: If the API is not configured or the request fails
        """
        if not image_bytes:
            raise ValidationError("Uploaded image is empty", field="image")
        if not self.is_available():
            raise OCRServiceError("Google Vision API key not configured")

        logger.debug(f"Sending {len(image_bytes)} bytes to Vision API")
        try:
            response = requests.post(
                self.base_url,
                params={"key": self.api_key},
                headers=self.headers,
                json=self._build_request(image_bytes),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise OCRServiceError(
                f"Vision API request timed out after {self.timeout}s", original_error=e
            ) from e
        except requests.exceptions.RequestException as e:
            raise OCRServiceError(
                f"Vision API request failed: {str(e)}", original_error=e
            ) from e

        if response.status_code != 200:
            raise OCRServiceError(
                f"Vision API returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise OCRServiceError("Vision API returned invalid JSON", original_error=e) from e

        return self._text_from_payload(payload)

    def _text_from_payload(self, payload: Dict[str, Any]) -> str:
        responses = payload.get("responses") or []
        if not responses:
            return ""

        first = responses[0] or {}
        error = first.get("error")
        if error:
            raise OCRServiceError(
                f"Vision API error: {error.get('message', 'unknown error')}",
                status_code=error.get("code"),
            )

        annotation = first.get("fullTextAnnotation")
        if not annotation:
            logger.info("Vision API detected no text in image")
            return ""
        return annotation.get("text", "")
