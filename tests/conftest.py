"""Shared fixtures for the standings tests."""

import pytest


def _feed_row(date, home, home_score, away_score, away, time="9:00 AM", field="Field 1"):
    return "\t".join(["1", date, time, field, home, home_score, away_score, away, "U12B", "", ""])


@pytest.fixture
def make_row():
    """Build an 11-field tab-delimited feed row."""
    return _feed_row


@pytest.fixture
def round_robin_rows():
    """Three clubs, one round: A beats B, B beats C, A and C tie."""
    return [
        _feed_row("9/7", "A", "2", "0", "B"),
        _feed_row("9/14", "B", "1", "0", "C"),
        _feed_row("9/21", "A", "1", "1", "C"),
    ]
