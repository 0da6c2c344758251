# tests/commands/test_delete.py
"""Tests for the delete command."""

from speccraft.commands import delete


class TestDeleteCommand:
    """Tests for delete.delete()."""

    def test_delete_session(self, store, session_id) -> None:
        result = delete.delete(session_id, store=store)

        assert result.success is True
        assert store.load(session_id) is None

    def test_delete_nonexistent(self, store) -> None:
        """Deleting an unknown session returns error."""
        result = delete.delete("missing", store=store)

        assert result.success is False
        assert result.error == "Session missing not found"
