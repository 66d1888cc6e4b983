"""Estimated-property reconciliation.

Some devices publish provisional values (for example stylus pressure) and
deliver the measured value later under the same sequence index. A property is
corrected when it is listed in both ``estimated_properties`` and
``estimated_properties_expecting_updates`` of the original event and the
correction no longer expects an update for it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from pointer_events.api.event_args import EventType, PointerEventArgs, PointerProperty
from pointer_events.api.geometry import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of one reconciliation attempt."""

    updated: bool
    event: PointerEventArgs | None = None
    properties: frozenset[str] = frozenset()


_NOT_UPDATED = ReconcileResult(updated=False)

# Names whose measured value can be copied from a correction.
_CORRECTABLE = frozenset(
    {
        PointerProperty.POSITION,
        PointerProperty.PRESSURE,
        PointerProperty.TILT_X,
        PointerProperty.TILT_Y,
    }
)


def reconcile(original: PointerEventArgs, correction: PointerEventArgs) -> ReconcileResult:
    """Apply measured values from correction to a previously estimated event.

    On success the result carries a ``pointerupdate`` copy of original with the
    corrected values and with the corrected names removed from both estimation
    sets. Original itself is never modified.
    """
    if original.sequence_index != correction.sequence_index:
        logger.debug(
            "pointer_reconcile_sequence_mismatch pointer_id=%d original=%d correction=%d",
            original.pointer_id,
            original.sequence_index,
            correction.sequence_index,
        )
        return _NOT_UPDATED
    pending = original.estimated_properties & original.estimated_properties_expecting_updates
    offered = pending - correction.estimated_properties_expecting_updates
    supplied = offered & _CORRECTABLE
    if offered - supplied:
        logger.warning(
            "pointer_reconcile_uncorrectable_properties pointer_id=%d sequence_index=%d names=%s",
            original.pointer_id,
            original.sequence_index,
            ",".join(sorted(offered - supplied)),
        )
    if not supplied:
        logger.debug(
            "pointer_reconcile_nothing_to_update pointer_id=%d sequence_index=%d",
            original.pointer_id,
            original.sequence_index,
        )
        return _NOT_UPDATED
    updated = replace(
        original,
        base=replace(original.base, event_type=EventType.POINTER_UPDATE),
        point=_corrected_point(original.point, correction.point, supplied),
        estimated_properties=original.estimated_properties - supplied,
        estimated_properties_expecting_updates=(
            original.estimated_properties_expecting_updates - supplied
        ),
    )
    return ReconcileResult(updated=True, event=updated, properties=frozenset(supplied))


def _corrected_point(point: Point, measured: Point, properties: frozenset[str]) -> Point:
    changes: dict[str, object] = {}
    if PointerProperty.POSITION in properties:
        changes["position"] = measured.position
        changes["precise_position"] = measured.precise_position
    if PointerProperty.PRESSURE in properties:
        changes["pressure"] = measured.pressure
    if PointerProperty.TILT_X in properties:
        changes["tilt_x_deg"] = measured.tilt_x_deg
    if PointerProperty.TILT_Y in properties:
        changes["tilt_y_deg"] = measured.tilt_y_deg
    if not changes:
        return point
    return replace(point, **changes)


__all__ = ["ReconcileResult", "reconcile"]
