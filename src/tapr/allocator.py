"""Column width allocation under a fixed terminal width.

Each column asks for a target width blended between its median and maximum.
The blend starts at "trust the maximum" and slides toward the median in 5%
steps until the comfort widths of all columns fit. The space left over is
then shared out in proportion to how far each target exceeds the comfort
width, never past a column's observed maximum.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from tapr.errors import TooManyColumnsError
from tapr.frame import SEPARATOR_WIDTH
from tapr.stats import ColumnWidthTriple

logger = logging.getLogger(__name__)

COMFORT_WIDTH = 7
"""Columns are never shrunk below this width unless their maximum is smaller."""

_MAX_BIAS_PERCENT = 100
_MIN_BIAS_PERCENT = 50
_BIAS_STEP_PERCENT = 5


@dataclass
class _Budget:
    bias_percent: int
    need: int
    available: int


def bias_weights() -> Iterator[int]:
    """Yield the candidate weights of the maximum, as percentages, best first."""
    yield from range(_MAX_BIAS_PERCENT, _MIN_BIAS_PERCENT - 1, -_BIAS_STEP_PERCENT)


def blended_target(triple: ColumnWidthTriple, bias_percent: int) -> int:
    """Return the width *triple* asks for when its maximum weighs *bias_percent*."""
    if bias_percent == 100:
        return triple.max
    return (triple.median * (100 - bias_percent) + triple.max * bias_percent) // 100


def _find_budget(
    triples: Sequence[ColumnWidthTriple],
    usable_width: int,
    separator_width: int,
) -> _Budget | None:
    column_count = len(triples)
    baseline = column_count * COMFORT_WIDTH + (column_count - 1) * separator_width
    slack = sum(COMFORT_WIDTH - t.max for t in triples if t.max < COMFORT_WIDTH)

    for bias in bias_weights():
        need = sum(
            max(0, blended_target(t, bias) - COMFORT_WIDTH) for t in triples
        )
        if need == 0:
            need = 1
        available = usable_width + slack - baseline
        if available >= 0:
            return _Budget(bias, need, available)
    return None


def allocate(
    triples: Sequence[ColumnWidthTriple],
    usable_width: int,
    separator_width: int = SEPARATOR_WIDTH,
) -> list[int]:
    """Decide the display width of every column.

    *usable_width* excludes the line-number gutter and its separator. Raises
    :class:`TooManyColumnsError` when even the comfort widths do not fit.
    """
    column_count = len(triples)
    if column_count == 0:
        return []

    budget = _find_budget(triples, usable_width, separator_width)
    if budget is None:
        raise TooManyColumnsError(column_count)

    allocation = [COMFORT_WIDTH] * column_count
    for ci, triple in enumerate(triples):
        target = blended_target(triple, budget.bias_percent)
        if target > COMFORT_WIDTH:
            share = (target - COMFORT_WIDTH) * budget.available // budget.need
            allocation[ci] += min(triple.max - COMFORT_WIDTH, share)
        elif triple.max < COMFORT_WIDTH:
            allocation[ci] = triple.max

    logger.debug(
        "allocated %s at bias %d%% (need=%d, available=%d)",
        allocation,
        budget.bias_percent,
        budget.need,
        budget.available,
    )
    return allocation
