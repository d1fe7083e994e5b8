"""Tests for recursion-limit depth clamping."""

from __future__ import annotations

import logging
import sys

import pytest

from sexpreader.core.depth_guard import depth_clamp


class TestDepthClamp:
    """Test depth_clamp against a controlled recursion limit."""

    @pytest.fixture(autouse=True)
    def _recursion_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "getrecursionlimit", lambda: 1000)

    def test_depth_within_limit_unchanged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sexpreader.core.depth_guard"):
            assert depth_clamp(64) == 64
        assert not caplog.records

    def test_depth_above_limit_clamped(self) -> None:
        # (1000 - 50) // 12
        assert depth_clamp(500) == 79

    def test_clamping_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sexpreader.core.depth_guard"):
            depth_clamp(10_000)

        assert len(caplog.records) == 1
        assert "Clamping to 79" in caplog.records[0].getMessage()

    def test_custom_reserve_and_frames(self) -> None:
        assert depth_clamp(1_000, reserve_frames=0, frames_per_level=10) == 100

    def test_never_below_one(self) -> None:
        assert depth_clamp(5, reserve_frames=2_000) == 1

    def test_boundary_exact_fit(self) -> None:
        assert depth_clamp(79) == 79
        assert depth_clamp(80) == 79
