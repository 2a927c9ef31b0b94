"""Tests for database connection and session management."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr

from src.database.connection import (
    CONNECT_TIMEOUT_SECONDS,
    configure_session_factory,
    create_db_engine,
    get_session,
)
from src.utils.config import DatabaseSettings


class TestCreateDbEngine(unittest.TestCase):
    """Tests for create_db_engine."""

    @patch("src.database.connection.create_engine")
    def test_configures_bounded_pool_with_timeout(self, mock_create_engine: MagicMock) -> None:
        """Test that the pool size and acquire timeout come from settings."""
        settings = DatabaseSettings(
            password=SecretStr("secret"),
            pool_size=5,
            max_overflow=2,
            pool_timeout=2.0,
        )

        create_db_engine(settings)

        kwargs = mock_create_engine.call_args.kwargs
        self.assertEqual(mock_create_engine.call_args.args[0], settings.url)
        self.assertEqual(kwargs["pool_size"], 5)
        self.assertEqual(kwargs["max_overflow"], 2)
        self.assertEqual(kwargs["pool_timeout"], 2.0)
        self.assertTrue(kwargs["pool_pre_ping"])
        self.assertEqual(kwargs["connect_args"], {"connect_timeout": CONNECT_TIMEOUT_SECONDS})


class TestGetSession(unittest.TestCase):
    """Tests for the get_session context manager."""

    def setUp(self) -> None:
        """Install a mock session factory."""
        self.mock_session = MagicMock()
        configure_session_factory(MagicMock(return_value=self.mock_session))

    def tearDown(self) -> None:
        """Reset the session factory."""
        configure_session_factory(None)

    def test_commits_and_closes_on_success(self) -> None:
        """Test that a clean exit commits."""
        with get_session() as session:
            self.assertIs(session, self.mock_session)

        self.mock_session.commit.assert_called_once()
        self.mock_session.rollback.assert_not_called()
        self.mock_session.close.assert_called_once()

    def test_rolls_back_and_reraises_on_error(self) -> None:
        """Test that an exception rolls back and propagates."""
        with self.assertRaises(ValueError):
            with get_session():
                raise ValueError("boom")

        self.mock_session.commit.assert_not_called()
        self.mock_session.rollback.assert_called_once()
        self.mock_session.close.assert_called_once()

    def test_rolls_back_when_commit_fails(self) -> None:
        """Test that a failing commit is rolled back and propagated."""
        self.mock_session.commit.side_effect = RuntimeError("commit failed")

        with self.assertRaises(RuntimeError):
            with get_session():
                pass

        self.mock_session.rollback.assert_called_once()
        self.mock_session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
