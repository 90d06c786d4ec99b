"""Unit tests for layout configuration."""

import pytest

from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig


class TestLayoutConfig:
    def test_default_thresholds(self) -> None:
        assert DEFAULT_CONFIG.commit_radius == pytest.approx(90.0)
        assert DEFAULT_CONFIG.near_radius(False) == pytest.approx(108.0)
        assert DEFAULT_CONFIG.near_radius(True) == pytest.approx(120.0)
        assert DEFAULT_CONFIG.capture_radius == pytest.approx(210.0)
        assert DEFAULT_CONFIG.unlock_radius == pytest.approx(240.0)
        assert DEFAULT_CONFIG.reveal_leave_radius == pytest.approx(48.0)
        assert DEFAULT_CONFIG.allow_non_lead_drag_while_locked is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"commit_multiplier": 2.0},          # commit above near-feedback
            {"capture_multiplier": 5.0},         # capture above unlock
            {"near_multiplier_locked": 1.0},     # below commit
            {"lock_radius": 0.0},
            {"drag_margin": -1.0},
            {"reveal_hysteresis": 0.5},
            {"reveal_anchor_fraction": 1.0},
        ],
    )
    def test_invalid_values_are_rejected(self, overrides) -> None:
        with pytest.raises(ValueError):
            LayoutConfig(**overrides)

    def test_with_overrides(self) -> None:
        config = DEFAULT_CONFIG.with_overrides({"lock_radius": 50.0})
        assert config.commit_radius == pytest.approx(75.0)
        assert DEFAULT_CONFIG.lock_radius == 60.0

    def test_with_unknown_override(self) -> None:
        with pytest.raises(ValueError, match="bogus"):
            DEFAULT_CONFIG.with_overrides({"bogus": 1.0})
