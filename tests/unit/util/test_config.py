"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from forum.config import PaginationSettings, Settings


class TestSettings:
    """Tests for Settings."""

    def test_nested_values_from_environment(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("PAGINATION__PAGE_SIZE", "25")
        monkeypatch.setenv("AUTH__UID_CLAIM", "student_id")

        # Act
        settings = Settings()

        # Assert
        assert settings.pagination.page_size == 25
        assert settings.auth.uid_claim == "student_id"

    def test_production_frontend_uses_https(self):
        settings = Settings(environment="production", frontend_host="forum.example.edu")

        assert settings.api.protocol == "https"
        assert settings.api.frontend_url == "https://forum.example.edu"

    def test_local_frontend_is_vite_dev_server(self):
        assert Settings(environment="development").api.frontend_url == (
            "http://localhost:5173"
        )


class TestPaginationSettings:
    """Tests for PaginationSettings."""

    @pytest.mark.parametrize("page_size", [0, 51])
    def test_page_size_out_of_range(self, page_size):
        with pytest.raises(ValidationError):
            PaginationSettings(page_size=page_size)
