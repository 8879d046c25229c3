"""Answer-key storage backends."""

from .base_storage import AnswerKeyStore
from .memory_storage import InMemoryAnswerKeyStore
from .sql_storage import SQLAnswerKeyStore

__all__ = ["AnswerKeyStore", "InMemoryAnswerKeyStore", "SQLAnswerKeyStore"]
