"""
Test configuration and fixtures for the Answer Grader test suite.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from answer_grader.config import Config
from answer_grader.database import db
from answer_grader.services import AnswerKeyService, CorrectionService, OCRService
from answer_grader.storage import InMemoryAnswerKeyStore, SQLAnswerKeyStore
from webapp.app_factory import create_app


@pytest.fixture
def memory_store():
    """Fresh in-memory answer-key store."""
    return InMemoryAnswerKeyStore()


@pytest.fixture
def exam(memory_store):
    """An exam registered in the in-memory store."""
    return memory_store.create_exam("Geography Quiz")


@pytest.fixture
def key_service(memory_store):
    return AnswerKeyService(memory_store)


@pytest.fixture
def correction_service(memory_store):
    return CorrectionService(memory_store)


@pytest.fixture
def test_config():
    """Configuration that never touches the environment or a real database."""
    return Config(
        debug=False,
        secret_key="test-secret-key",
        database_url="sqlite:///:memory:",
        vision_api_key="test-api-key",
    )


@pytest.fixture
def mock_ocr_service():
    """OCR collaborator whose transcript each test sets."""
    service = Mock(spec=OCRService)
    service.extract_text.return_value = ""
    return service


@pytest.fixture
def app(test_config, mock_ocr_service):
    """Create test application backed by an in-memory SQLite database."""
    app = create_app("testing", config=test_config, ocr_service=mock_ocr_service)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sql_store(app):
    """SQL store bound to the test application's database."""
    return SQLAnswerKeyStore()
