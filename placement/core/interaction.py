"""Drag and hover handlers over an explicit, immutable interaction state.

Each handler takes the current `InteractionState` and returns the next one,
so the surrounding scene layer owns all mutable state and the geometry
functions stay pure.
"""

from __future__ import annotations
import logging
from uuid import uuid4

from placement.models import (
    REPOSITION_MARGIN, DROP_MARGIN,
    DropOutcome, InteractionState, Opening, OpeningTemplate, Point2D, PointerHit,
    WallPosition,
)
from placement.core.frame import calculate_template_drop_position
from placement.core.projection import calculate_position_from_pointer
from placement.core.validator import normalize_openings, validate_opening_placement, wall_fraction

logger = logging.getLogger(__name__)


def begin_opening_drag(
    state: InteractionState,
    opening: Opening,
    hit: PointerHit,
    coordinates: list[Point2D],
    margin: tuple[float, float] = REPOSITION_MARGIN,
) -> InteractionState:
    preview = calculate_position_from_pointer(hit, opening, coordinates, margin)
    return state.model_copy(update={"dragged_opening": opening, "preview": preview})


def update_opening_drag(
    state: InteractionState,
    hit: PointerHit,
    coordinates: list[Point2D],
    margin: tuple[float, float] = REPOSITION_MARGIN,
) -> InteractionState:
    """Refresh the preview; a frame with no selectable wall keeps the last one."""
    if not state.is_dragging_opening:
        return state
    preview = calculate_position_from_pointer(hit, state.dragged_opening, coordinates, margin)
    if preview is None:
        return state
    return state.model_copy(update={"preview": preview})


def end_opening_drag(state: InteractionState) -> tuple[InteractionState, WallPosition | None]:
    """
    Release the dragged opening.

    Returns the cleared state and the position to commit, or None when no
    preview was ever computed.
    """
    if not state.is_dragging_opening:
        return state, None
    committed = state.preview
    return state.model_copy(update={"dragged_opening": None, "preview": None}), committed


def enter_wall(state: InteractionState, wall_index: int) -> InteractionState:
    """Highlight a wall, but only while something is being dragged."""
    if not (state.is_dragging_opening or state.is_dragging_template):
        return state
    return state.model_copy(update={"hovered_wall": wall_index})


def leave_wall(state: InteractionState) -> InteractionState:
    return state.model_copy(update={"hovered_wall": None})


def begin_template_drag(state: InteractionState, template: OpeningTemplate) -> InteractionState:
    return state.model_copy(update={"dragged_template": template})


def drop_template(
    state: InteractionState,
    wall_index: int,
    hit: PointerHit,
    coordinates: list[Point2D],
    height: float,
    openings: list[Opening],
    margin: tuple[float, float] = DROP_MARGIN,
) -> tuple[InteractionState, DropOutcome | None]:
    """
    Drop the dragged template onto `wall_index`.

    `openings` carry physical widths; they are converted to wall fractions
    before validation. On acceptance the outcome holds the new opening.
    The template drag ends either way.
    """
    template = state.dragged_template
    if template is None:
        return state, None

    cleared = state.model_copy(update={"dragged_template": None, "hovered_wall": None})
    position = calculate_template_drop_position(hit.to_point(), wall_index, coordinates, height, margin)
    if position is None:
        return cleared, None

    result = validate_opening_placement(
        wall_index,
        position,
        wall_fraction(template.width, coordinates, wall_index),
        template.height,
        normalize_openings(openings, coordinates),
    )
    if not result.valid:
        logger.debug(f"Rejected {template.type.value} drop on wall {wall_index}: {result.reason}")
        return cleared, DropOutcome(wall_index=wall_index, position=position, result=result)

    opening = Opening(
        id=uuid4().hex,
        type=template.type,
        wall_index=wall_index,
        position=position,
        width=template.width,
        height=template.height,
        bottom_offset=template.bottom_offset,
    )
    return cleared, DropOutcome(
        wall_index=wall_index, position=position, result=result, opening=opening,
    )
