"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_text() -> str:
    """Generate a large social text (~100KB)."""
    lines = []
    for i in range(1500):
        lines.append(
            f"post {i} by @user{i} about #topic{i % 50} see https://example.com/p/{i} ok"
        )
    return "\n".join(lines)
