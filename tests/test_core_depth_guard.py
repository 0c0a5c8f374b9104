"""Tests for core.depth_guard: DepthGuard context manager and depth_clamp.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest

from i18nlint_react.constants import MAX_DEPTH
from i18nlint_react.core import DepthGuard, depth_clamp
from i18nlint_react.diagnostics import DepthLimitExceededError, DiagnosticCode


class TestDepthGuard:
    """DepthGuard increments on enter, decrements on exit."""

    def test_defaults(self) -> None:
        """Default max_depth is MAX_DEPTH, starting depth zero."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0
        assert guard.depth == 0

    def test_nesting(self) -> None:
        """Nested with-blocks track depth."""
        guard = DepthGuard(max_depth=3)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
            assert guard.depth == 1
        assert guard.depth == 0

    def test_limit_raises(self) -> None:
        """Entering beyond max_depth raises with a MAX_DEPTH_EXCEEDED diagnostic."""
        guard = DepthGuard(max_depth=2)

        with guard, guard:
            assert guard.is_exceeded()
            with pytest.raises(DepthLimitExceededError) as exc_info, guard:
                pass

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert "2" in exc_info.value.diagnostic.message

    def test_failed_enter_leaves_depth_unchanged(self) -> None:
        """A rejected enter does not leak depth."""
        guard = DepthGuard(max_depth=1)

        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_exception_in_body_restores_depth(self) -> None:
        """Depth is restored when the guarded body raises."""
        guard = DepthGuard(max_depth=5)

        with pytest.raises(KeyError), guard:
            raise KeyError("x")

        assert guard.depth == 0

    def test_reset(self) -> None:
        """reset() returns depth to zero."""
        guard = DepthGuard(max_depth=5)
        guard.__enter__()

        guard.reset()

        assert guard.depth == 0


class TestDepthClamp:
    """depth_clamp() keeps limits inside the interpreter recursion limit."""

    def test_within_limit_unchanged(self) -> None:
        """Small depths pass through."""
        assert depth_clamp(10) == 10

    def test_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Depths beyond the recursion limit are clamped and logged."""
        limit = sys.getrecursionlimit()
        expected = (limit - 50) // 2

        with caplog.at_level(logging.WARNING, logger="i18nlint_react.core.depth_guard"):
            assert depth_clamp(limit * 10) == expected

        assert any("Clamping" in record.getMessage() for record in caplog.records)

    def test_frames_per_level(self) -> None:
        """Walkers costing more frames per level get a lower ceiling."""
        limit = sys.getrecursionlimit()

        assert depth_clamp(limit * 10, frames_per_level=4) == (limit - 50) // 4

    def test_default_depth_fits_builder(self) -> None:
        """MAX_DEPTH is not clamped for the tree builder at the default limit."""
        if sys.getrecursionlimit() < 1000:
            pytest.skip("recursion limit lowered by the environment")

        assert depth_clamp(MAX_DEPTH, frames_per_level=4) == MAX_DEPTH
