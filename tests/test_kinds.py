"""
Tests for event kind constants.
"""

import pytest

from ketab_protocol.kinds import (
    CHAPTER_ID_PREFIX,
    KIND_BOOK,
    KIND_CHAPTER,
    KIND_LIBRARY,
    KIND_LIBRARY_ENTRY,
    LIBRARY_PROTOCOL_KINDS,
    is_ketab_protocol_kind,
)


class TestKinds:
    """Tests for the kind constants."""

    def test_values(self):
        """Test the kind numbers."""
        assert KIND_LIBRARY == 38890
        assert KIND_BOOK == 38891
        assert KIND_LIBRARY_ENTRY == 38892
        assert KIND_CHAPTER == 30023

    def test_protocol_kinds(self):
        """Test chapters are not counted as protocol kinds."""
        assert LIBRARY_PROTOCOL_KINDS == (38890, 38891, 38892)
        assert CHAPTER_ID_PREFIX == "30023:"

    @pytest.mark.parametrize("kind,expected", [
        (38890, True),
        (38891, True),
        (38892, True),
        (30023, False),
        (1, False),
    ])
    def test_is_ketab_protocol_kind(self, kind, expected):
        assert is_ketab_protocol_kind(kind) is expected
