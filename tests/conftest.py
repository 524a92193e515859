"""Pytest configuration and shared fixtures for placement tests."""

from __future__ import annotations

import pytest

from placement.models import Opening, OpeningType, Point2D


def make_opening(
    position: float = 0.5,
    width: float = 0.2,
    wall_index: int = 0,
    height: float = 1.2,
    bottom_offset: float = 0.9,
    opening_id: str = "",
    opening_type: OpeningType = OpeningType.WINDOW,
) -> Opening:
    """Create a test opening with the given placement."""
    return Opening(
        id=opening_id,
        type=opening_type,
        wall_index=wall_index,
        position=position,
        width=width,
        height=height,
        bottom_offset=bottom_offset,
    )


@pytest.fixture
def square() -> list[Point2D]:
    """10 x 10 footprint, counterclockwise from the origin."""
    return [
        Point2D(x=0, z=0),
        Point2D(x=10, z=0),
        Point2D(x=10, z=10),
        Point2D(x=0, z=10),
    ]
