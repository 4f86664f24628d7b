# tests/unit/config/test_settings.py — v1
"""Tests for config/settings.py — typed Settings and validation rules."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from localcommunity.config.settings import ConfigurationError, Settings, load_settings
from localcommunity.graph.models import BridgingMeasure


class TestSettingsDefaults:
    def test_default_detector(self):
        s = Settings(_env_file=None)
        assert s.default_detector == "bridge_bounding"

    def test_default_detector_parameters(self):
        s = Settings(_env_file=None)
        assert s.neighborhood_hops == 1
        assert s.bridge_bounding_measure is BridgingMeasure.ELB2
        assert s.bridge_bounding_threshold == 0.5
        assert s.bagrow_max_size == 500
        assert s.clauset_target_size == 100

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsValidation:
    def test_threshold_out_of_range(self):
        with pytest.raises(ConfigurationError, match="BRIDGE_BOUNDING_THRESHOLD"):
            Settings(_env_file=None, bridge_bounding_threshold=1.5)

    def test_max_bytes_with_log_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="LOG_MAX_BYTES"):
            Settings(_env_file=None, log_file=tmp_path / "x.log", log_max_bytes=0)

    def test_max_bytes_ignored_without_log_file(self):
        s = Settings(_env_file=None, log_max_bytes=0)
        assert s.log_max_bytes == 0

    def test_negative_backup_count(self):
        with pytest.raises(ConfigurationError, match="LOG_BACKUP_COUNT"):
            Settings(_env_file=None, log_backup_count=-1)

    def test_errors_are_collected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(_env_file=None, bridge_bounding_threshold=-0.1, log_backup_count=-1)
        assert "THRESHOLD" in str(exc_info.value)
        assert "BACKUP_COUNT" in str(exc_info.value)

    def test_negative_hops(self):
        with pytest.raises(ValidationError, match="neighborhood_hops"):
            Settings(_env_file=None, neighborhood_hops=-1)

    def test_zero_size(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bagrow_max_size=0)

    def test_unknown_detector(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_detector="walktrap")

    def test_unknown_measure(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bridge_bounding_measure="jaccard")


class TestEnvironment:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LOCALCOMMUNITY_BAGROW_MAX_SIZE", "200")
        monkeypatch.setenv("LOCALCOMMUNITY_DEFAULT_DETECTOR", "lwp")
        s = Settings(_env_file=None)
        assert s.bagrow_max_size == 200
        assert s.default_detector == "lwp"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LOCALCOMMUNITY_CLAUSET_TARGET_SIZE=12\n", encoding="utf-8")
        s = Settings(_env_file=env_file)
        assert s.clauset_target_size == 12


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, neighborhood_hops=4)
        assert s.neighborhood_hops == 4

    def test_inconsistent(self):
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None, bridge_bounding_threshold=2.0)
