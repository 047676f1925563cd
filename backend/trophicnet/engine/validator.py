"""Level validation — population and occupation sums must form a stochastic structure.

Every level is checked and every violation is reported; the caller gets the
complete list in one sweep. No geometry is computed before this passes.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from trophicnet.engine.config import NetworkConfig
from trophicnet.engine.errors import DefectKind, InvalidNetworkError, NetworkDefect
from trophicnet.engine.levels import Level

logger = logging.getLogger(__name__)


def round_half_up(value: float, decimals: int) -> float:
    """Round with halves going up, so 0.995 style sums round the same way every time."""
    if not math.isfinite(value):
        return value
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def rounded_sum(values: Sequence[float], decimals: int = 2) -> float:
    if len(values) == 0:
        return 0.0
    with np.errstate(invalid="ignore", over="ignore"):
        total = float(np.sum(np.asarray(values, dtype=np.float64)))
    return round_half_up(total, decimals)


def is_stochastic(values: Sequence[float], config: NetworkConfig | None = None) -> bool:
    """True if ``values`` sums to 1 after rounding, within the configured slack."""
    config = config or NetworkConfig()
    total = rounded_sum(values, config.sum_decimals)
    # NaN or infinite entries make the sum non-finite: a bad sum, not a crash
    if not math.isfinite(total):
        return False
    return abs(total - 1.0) <= config.sum_tolerance + 1e-12


def validate_levels(
    levels: Sequence[Level] | None,
    config: NetworkConfig | None = None,
) -> list[NetworkDefect]:
    """Return every defect found in ``levels``. An empty list means valid."""
    config = config or NetworkConfig()

    if not levels or len(levels) < 2:
        return [
            NetworkDefect(
                kind=DefectKind.STRUCTURAL,
                message="Please provide at least two trophic levels.",
            )
        ]

    defects: list[NetworkDefect] = []
    for k, level in enumerate(levels):
        defects.extend(_check_populations(level, k, config))
        if k > 0:
            defects.extend(_check_occupation(level, levels[k - 1], k, config))

    if defects:
        logger.debug("Validation found %d defect(s) in %d levels", len(defects), len(levels))
    return defects


def ensure_valid(levels: Sequence[Level] | None, config: NetworkConfig | None = None) -> None:
    """Raise InvalidNetworkError carrying all defects if ``levels`` is invalid."""
    defects = validate_levels(levels, config)
    if defects:
        raise InvalidNetworkError(defects)


def _check_populations(level: Level, k: int, config: NetworkConfig) -> list[NetworkDefect]:
    defects: list[NetworkDefect] = []
    if not is_stochastic(level.populations, config):
        defects.append(NetworkDefect(
            kind=DefectKind.STOCHASTIC_SUM,
            message=f"The sum of populations is not equal to 1 in the trophic level #{k + 1}.",
            level=k,
        ))

    if level.labels is not None and len(level.labels) != len(level.populations):
        defects.append(NetworkDefect(
            kind=DefectKind.SHAPE_MISMATCH,
            message=(
                f"The number of labels of the trophic level #{k + 1} should correspond "
                f"to its number of populations."
            ),
            level=k,
        ))
    return defects


def _check_occupation(
    level: Level,
    previous: Level,
    k: int,
    config: NetworkConfig,
) -> list[NetworkDefect]:
    matrix = level.occupation_per_previous_level
    if matrix is None:
        return [NetworkDefect(
            kind=DefectKind.SHAPE_MISMATCH,
            message=f"The matrix occupationPerPreviousLevel is missing in the trophic level #{k + 1}.",
            level=k,
        )]

    defects: list[NetworkDefect] = []
    if len(matrix) != len(level.populations):
        defects.append(NetworkDefect(
            kind=DefectKind.SHAPE_MISMATCH,
            message=(
                f"The number of rows in the matrix occupationPerPreviousLevel of the "
                f"trophic level #{k + 1} should correspond to its number of populations."
            ),
            level=k,
        ))

    for r, row in enumerate(matrix):
        if len(row) != len(previous.populations):
            defects.append(NetworkDefect(
                kind=DefectKind.SHAPE_MISMATCH,
                message=(
                    f"The number of columns in the row #{r + 1} of the matrix "
                    f"occupationPerPreviousLevel of the trophic level #{k + 1} does not "
                    f"correspond to the number of populations given in the previous trophic level."
                ),
                level=k,
                row=r,
            ))

        if not is_stochastic(row, config):
            defects.append(NetworkDefect(
                kind=DefectKind.STOCHASTIC_SUM,
                message=(
                    f"The total of the line #{r + 1} of the matrix occupationPerPreviousLevel "
                    f"of the trophic level #{k + 1} is not equal to 1."
                ),
                level=k,
                row=r,
            ))
    return defects
