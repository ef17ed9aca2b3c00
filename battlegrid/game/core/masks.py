"""Skill mask generation.

Each mask is a ``MASK_SIZE`` x ``MASK_SIZE`` boolean array computed from a
closed-form rule around ``center = MASK_SIZE // 2``.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from battlegrid.game.core.models import MASK_SIZE, SkillType

_MASK_CACHE: dict[SkillType, np.ndarray] = {}


def cone_mask(size: int = MASK_SIZE) -> np.ndarray:
    """Apex-up cone widening one column per row on each side."""
    center = size // 2
    rows, cols = np.indices((size, size))
    return np.abs(cols - center) <= rows


def cross_mask(size: int = MASK_SIZE) -> np.ndarray:
    """Full center row and full center column."""
    center = size // 2
    rows, cols = np.indices((size, size))
    return (rows == center) | (cols == center)


def diamond_mask(size: int = MASK_SIZE) -> np.ndarray:
    """Cells within Manhattan distance ``center`` of the center."""
    center = size // 2
    rows, cols = np.indices((size, size))
    return np.abs(rows - center) + np.abs(cols - center) <= center


MASK_BUILDERS: dict[SkillType, Callable[[], np.ndarray]] = {
    SkillType.CONE: cone_mask,
    SkillType.CROSS: cross_mask,
    SkillType.DIAMOND: diamond_mask,
}


def build_mask(skill: SkillType) -> np.ndarray:
    """Build a fresh mask for the given skill type."""
    return MASK_BUILDERS[skill]()


def mask_for(skill: SkillType) -> np.ndarray:
    """Return the shared, read-only mask for a skill type."""
    mask = _MASK_CACHE.get(skill)
    if mask is None:
        mask = build_mask(skill)
        mask.setflags(write=False)
        _MASK_CACHE[skill] = mask
    return mask
