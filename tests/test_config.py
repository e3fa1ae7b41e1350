"""Tests for store configuration."""

import pytest

from liftlog.config import FinishPolicy, StoreConfig


class TestStoreConfig:
    """Tests for StoreConfig."""

    def test_defaults(self):
        """Test default configuration."""
        config = StoreConfig()
        assert config.seed_exercises == ("Bench Press", "Squat", "Deadlift")
        assert config.finish_policy == FinishPolicy.RESTAMP
        assert config.lock_finished_sessions is False
        assert config.weight_unit == "kg"

    def test_policy_from_string(self):
        """Finish policy may be given as a string."""
        assert StoreConfig(finish_policy="keep_first").finish_policy == FinishPolicy.KEEP_FIRST

    def test_invalid_unit(self):
        """Test an unsupported weight unit."""
        with pytest.raises(ValueError):
            StoreConfig(weight_unit="stone")

    def test_from_env_empty(self):
        """No variables means defaults."""
        assert StoreConfig.from_env({}) == StoreConfig()

    def test_from_env(self):
        """Test reading LIFTLOG_* variables."""
        config = StoreConfig.from_env(
            {
                "LIFTLOG_SEED_EXERCISES": "Row, Press ,,Pull-up",
                "LIFTLOG_FINISH_POLICY": "KEEP_FIRST",
                "LIFTLOG_LOCK_FINISHED": "yes",
                "LIFTLOG_WEIGHT_UNIT": "LB",
            }
        )
        assert config.seed_exercises == ("Row", "Press", "Pull-up")
        assert config.finish_policy == FinishPolicy.KEEP_FIRST
        assert config.lock_finished_sessions is True
        assert config.weight_unit == "lb"

    def test_from_env_invalid(self):
        """Test bad environment values."""
        with pytest.raises(ValueError):
            StoreConfig.from_env({"LIFTLOG_FINISH_POLICY": "sometimes"})
        with pytest.raises(ValueError):
            StoreConfig.from_env({"LIFTLOG_LOCK_FINISHED": "maybe"})
