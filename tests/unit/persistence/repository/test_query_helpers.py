"""Unit tests for the SQL helpers shared by the PostgreSQL repositories."""

import pytest
from sqlalchemy import column

from forum.persistence.repository.base import contains_ci, escape_like


class TestEscapeLike:
    """Tests for escape_like."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("algebra", "algebra"),
            ("100%", "100\\%"),
            ("snake_case", "snake\\_case"),
            ("back\\slash", "back\\\\slash"),
        ],
    )
    def test_wildcards_are_escaped(self, text, expected):
        assert escape_like(text) == expected


class TestContainsCi:
    """Tests for contains_ci."""

    def test_wraps_escaped_query_in_wildcards(self):
        # Act
        expr = contains_ci(column("title"), "50%")

        # Assert
        assert expr.right.value == "%50\\%%"
        assert expr.modifiers["escape"] == "\\"
