"""
Shared pytest fixtures for all tests.
"""
import tempfile
from pathlib import Path
from typing import Iterator

import pytest

from core.permissions import PermissionChecker, PermissionMode, PermissionStore


SESSION_ID = "ses_test"


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store() -> PermissionStore:
    """Fresh permission store with the ask default."""
    return PermissionStore()


@pytest.fixture
def checker(store: PermissionStore) -> PermissionChecker:
    """Permission checker backed by the store fixture."""
    return PermissionChecker(store)


@pytest.fixture
def session_id() -> str:
    return SESSION_ID


@pytest.fixture
def safe_session(checker: PermissionChecker) -> str:
    """Session in safe mode."""
    checker.set_session_mode(SESSION_ID, PermissionMode.SAFE)
    return SESSION_ID


@pytest.fixture
def ask_session(checker: PermissionChecker) -> str:
    """Session in ask mode."""
    checker.set_session_mode(SESSION_ID, PermissionMode.ASK)
    return SESSION_ID


@pytest.fixture
def allow_all_session(checker: PermissionChecker) -> str:
    """Session in allow-all mode."""
    checker.set_session_mode(SESSION_ID, PermissionMode.ALLOW_ALL)
    return SESSION_ID
