"""Tunable layout parameters.

Every heuristic number the engine uses lives on :class:`LayoutConfig`, with
defaults taken from :mod:`mind_layout.layout.constants`.  A config is
immutable; derive variants with :meth:`LayoutConfig.for_density` or
:meth:`LayoutConfig.with_overrides`.
"""

from __future__ import annotations

__all__ = ["LayoutConfig"]

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from mind_layout.layout import constants as c


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters of the full and incremental layout passes."""

    density: str = c.DEFAULT_DENSITY
    spacing: float = 1.0

    # Dimension estimation
    node_dims: dict[str, tuple[float, float]] = field(
        default_factory=lambda: dict(c.NODE_DIMS)
    )
    card_types: frozenset[str] = c.CARD_TYPES
    label_char_width: dict[str, float] = field(
        default_factory=lambda: dict(c.LABEL_CHAR_WIDTH)
    )
    default_char_width: float = c.DEFAULT_CHAR_WIDTH
    label_free_chars: int = c.LABEL_FREE_CHARS
    max_label_width: float = c.MAX_LABEL_WIDTH
    card_char_width: float = c.CARD_CHAR_WIDTH
    card_min_text_width: float = c.CARD_MIN_TEXT_WIDTH
    card_inner_min_width: float = c.CARD_INNER_MIN_WIDTH
    card_inner_max_width: float = c.CARD_INNER_MAX_WIDTH
    card_chrome_width: float = c.CARD_CHROME_WIDTH
    card_max_width: float = c.CARD_MAX_WIDTH
    card_line_height: float = c.CARD_LINE_HEIGHT
    card_max_height: float = c.CARD_MAX_HEIGHT
    soft_width_cap: float = c.SOFT_WIDTH_CAP
    soft_width_falloff: float = c.SOFT_WIDTH_FALLOFF
    max_layout_width: float = c.MAX_LAYOUT_WIDTH

    # Radial placement
    node_pad: float = c.NODE_PAD
    base_ring_gap: dict[str, float] = field(
        default_factory=lambda: dict(c.BASE_RING_GAP)
    )
    default_ring_gap: float = c.DEFAULT_RING_GAP
    arc_slack: float = c.ARC_SLACK
    min_arc_sweep: float = c.MIN_ARC_SWEEP
    max_ring_gap_factor: float = c.MAX_RING_GAP_FACTOR
    demand_boost_scale: float = c.DEMAND_BOOST_SCALE
    demand_boost_cap: float = c.DEMAND_BOOST_CAP
    per_child_radius: float = c.PER_CHILD_RADIUS
    sibling_gap_angle: float = c.SIBLING_GAP_ANGLE
    sibling_gap_arc: float = c.SIBLING_GAP_ARC
    min_usable_sweep: float = c.MIN_USABLE_SWEEP
    even_weight: float = c.EVEN_WEIGHT
    demand_weight: float = c.DEMAND_WEIGHT
    width_weight: float = c.WIDTH_WEIGHT
    sweep_floor_factor: float = c.SWEEP_FLOOR_FACTOR
    root_start_angle: float = c.ROOT_START_ANGLE

    # Global scaling
    target_radius_base: float = c.TARGET_RADIUS_BASE
    target_radius_per_sqrt_node: float = c.TARGET_RADIUS_PER_SQRT_NODE
    target_radius_per_extra_root_branch: float = c.TARGET_RADIUS_PER_EXTRA_ROOT_BRANCH
    free_root_branches: int = c.FREE_ROOT_BRANCHES

    # Collision relaxation
    collision_pad_x: float = c.COLLISION_PAD_X
    collision_pad_y: float = c.COLLISION_PAD_Y
    collision_iters: int = c.COLLISION_ITERS
    finish_iters: int = c.FINISH_ITERS
    push_epsilon: float = c.PUSH_EPSILON
    move_epsilon: float = c.MOVE_EPSILON
    spring_back: float = c.SPRING_BACK
    max_radial_drift: float = c.MAX_RADIAL_DRIFT
    min_radial_drift: float = c.MIN_RADIAL_DRIFT
    finish_extra_drift: float = c.FINISH_EXTRA_DRIFT
    min_shell_width: float = c.MIN_SHELL_WIDTH
    child_outward_gap: dict[str, float] = field(
        default_factory=lambda: dict(c.CHILD_OUTWARD_GAP)
    )
    inner_core_radius: float = c.INNER_CORE_RADIUS
    inner_core_depth_step: float = c.INNER_CORE_DEPTH_STEP

    # Incremental placement
    child_base_distance: dict[str, float] = field(
        default_factory=lambda: dict(c.CHILD_BASE_DISTANCE)
    )
    default_child_distance: float = c.DEFAULT_CHILD_DISTANCE
    candidate_angle_offsets: tuple[float, ...] = c.CANDIDATE_ANGLE_OFFSETS
    candidate_distance_factors: tuple[float, ...] = c.CANDIDATE_DISTANCE_FACTORS
    placement_clearance: float = c.PLACEMENT_CLEARANCE
    clearance_reward_cap: float = c.CLEARANCE_REWARD_CAP
    violation_penalty: float = c.VIOLATION_PENALTY
    clearance_weight: float = c.CLEARANCE_WEIGHT
    sibling_spread: float = c.SIBLING_SPREAD
    sibling_weight: float = c.SIBLING_WEIGHT
    distance_weight: float = c.DISTANCE_WEIGHT
    offset_weight: float = c.OFFSET_WEIGHT
    fallback_angle: float = c.FALLBACK_ANGLE

    @classmethod
    def for_density(cls, density: str) -> LayoutConfig:
        """Return the default config scaled to a density preset."""
        if density not in c.DENSITY_FACTORS:
            choices = ", ".join(sorted(c.DENSITY_FACTORS))
            raise ValueError(f"Unknown density '{density}' (expected one of: {choices})")
        return cls(density=density, spacing=c.DENSITY_FACTORS[density])

    def with_overrides(self, overrides: Mapping[str, Any]) -> LayoutConfig:
        """Return a copy with fields replaced from a plain mapping.

        Dict-valued fields are merged key by key; list values become tuples.
        Raises ValueError when a key is unknown or a value does not have the
        shape of the field's default.
        """
        known = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown layout option '{key}'")
            changes[key] = _coerce_option(key, getattr(self, key), value)
        if "density" in changes and "spacing" not in changes:
            density = changes["density"]
            if density not in c.DENSITY_FACTORS:
                raise ValueError(f"Unknown density '{density}'")
            changes["spacing"] = c.DENSITY_FACTORS[density]
        return replace(self, **changes)

    # -- per-type lookups -------------------------------------------------

    def dims_for(self, node_type: str) -> tuple[float, float]:
        return self.node_dims.get(node_type, self.node_dims[c.FALLBACK_TYPE])

    def ring_gap(self, child_type: str) -> float:
        return self.base_ring_gap.get(child_type, self.default_ring_gap) * self.spacing

    def outward_gap(self, node_type: str) -> float:
        gap = self.child_outward_gap.get(
            node_type, self.child_outward_gap[c.FALLBACK_TYPE]
        )
        return gap * self.spacing

    def child_distance(self, parent_type: str) -> float:
        distance = self.child_base_distance.get(parent_type, self.default_child_distance)
        return distance * self.spacing


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _number_sequence(key: str, value: Any, length: int | None = None) -> tuple:
    if not isinstance(value, (list, tuple)) or not all(_is_number(v) for v in value):
        raise ValueError(f"Layout option '{key}' expects a list of numbers")
    if length is not None and len(value) != length:
        raise ValueError(f"Layout option '{key}' expects {length} numbers per entry")
    return tuple(value)


def _coerce_option(key: str, current: Any, value: Any) -> Any:
    """Check an override value against the type of the field's default."""
    if isinstance(current, str):
        if not isinstance(value, str):
            raise ValueError(f"Layout option '{key}' expects a string")
        return value
    if isinstance(current, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Layout option '{key}' expects an integer")
        return value
    if isinstance(current, float):
        if not _is_number(value):
            raise ValueError(f"Layout option '{key}' expects a finite number")
        return value
    if isinstance(current, dict):
        if not isinstance(value, Mapping):
            raise ValueError(f"Layout option '{key}' expects a mapping")
        # node_dims holds (width, height) pairs, the other tables plain numbers
        pairs = any(isinstance(v, tuple) for v in current.values())
        merged = dict(current)
        for name, entry in value.items():
            if pairs:
                merged[name] = _number_sequence(f"{key}.{name}", entry, 2)
            elif _is_number(entry):
                merged[name] = entry
            else:
                raise ValueError(f"Layout option '{key}.{name}' expects a finite number")
        return merged
    if isinstance(current, frozenset):
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"Layout option '{key}' expects a list of strings")
        return frozenset(value)
    if isinstance(current, tuple):
        return _number_sequence(key, value)
    return value
