"""Tests for the chain id tracker."""

from chain_registry_validator.application.services import GroupTracker


class TestGroupTracker:
    """Test GroupTracker service."""

    def test_register(self):
        """Test the first directory is returned for a repeated id."""
        tracker = GroupTracker("Mainnet")
        assert tracker.register_chain_id("dym_1100-1", "dymension") is None
        assert tracker.register_chain_id("dym_1100-1", "copy") == "dymension"
        assert tracker.register_chain_id("dym_1100-1", "copy2") == "dymension"
        assert len(tracker) == 1

    def test_reset(self, caplog):
        """Test reset forgets every id."""
        tracker = GroupTracker("Mainnet")
        tracker.register_chain_id("a-1", "a")
        with caplog.at_level("DEBUG"):
            tracker.reset()
        assert len(tracker) == 0
        assert tracker.register_chain_id("a-1", "b") is None
        assert "Discarding 1 chain ids of group Mainnet" in caplog.text
