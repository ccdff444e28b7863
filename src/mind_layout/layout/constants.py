"""Layout constants used across layout modules.

Centralizes the tunable numbers of the dimension estimator, radial placer,
global scaler, collision relaxer and incremental placer.  They are bundled
into :class:`mind_layout.layout.config.LayoutConfig`; change them there
rather than here.
"""

# ---------------------------------------------------------------------------
# Node types
# ---------------------------------------------------------------------------
FALLBACK_TYPE: str = "task"
"""Type whose defaults apply to unknown node types."""

CARD_TYPES: frozenset[str] = frozenset({"goal", "feature", "task"})
"""Types rendered as cards with wrapped title text."""

CHILD_TYPE: dict[str, str] = {
    "root": "domain",
    "domain": "feature",
    "goal": "feature",
    "feature": "task",
    "task": "task",
}
"""Type given to a new child, keyed by its parent's type."""

# ---------------------------------------------------------------------------
# Dimension estimation
# ---------------------------------------------------------------------------
NODE_DIMS: dict[str, tuple[float, float]] = {
    "root": (160.0, 56.0),
    "domain": (170.0, 50.0),
    "goal": (190.0, 76.0),
    "feature": (180.0, 70.0),
    "task": (180.0, 70.0),
}
"""Default (width, height) per node type."""

UNTITLED_LABEL: str = "Untitled"
"""Label measured in place of an empty one."""

LABEL_CHAR_WIDTH: dict[str, float] = {
    "root": 7.2,
    "domain": 6.8,
}
"""Average character width for non-card labels, per type."""

DEFAULT_CHAR_WIDTH: float = 6.2
"""Average character width for types missing from LABEL_CHAR_WIDTH."""

LABEL_FREE_CHARS: int = 14
"""Characters a non-card label may have before its node widens."""

MAX_LABEL_WIDTH: float = 420.0
"""Hard cap on the estimated width of a non-card node."""

CARD_CHAR_WIDTH: float = 6.15
"""Average character width of card title text."""

CARD_MIN_TEXT_WIDTH: float = 52.0
"""Smallest raw text width a card label is measured at."""

CARD_INNER_MIN_WIDTH: float = 120.0
"""Minimum width of the card text column."""

CARD_INNER_MAX_WIDTH: float = 300.0
"""Maximum width of the card text column; longer text wraps."""

CARD_CHROME_WIDTH: float = 38.0
"""Horizontal padding and decorations around the card text column."""

CARD_MAX_WIDTH: float = 380.0
"""Hard cap on card width."""

CARD_LINE_HEIGHT: float = 16.0
"""Height added per wrapped line beyond the first."""

CARD_MAX_HEIGHT: float = 220.0
"""Hard cap on card height."""

SOFT_WIDTH_CAP: float = 220.0
"""Width above which layout width grows at SOFT_WIDTH_FALLOFF."""

SOFT_WIDTH_FALLOFF: float = 0.52
"""Growth rate of layout width beyond SOFT_WIDTH_CAP."""

MAX_LAYOUT_WIDTH: float = 340.0
"""Hard cap on the width the radial placer sees."""

# ---------------------------------------------------------------------------
# Radial placement
# ---------------------------------------------------------------------------
NODE_PAD: float = 18.0
"""Padding added to a node's width for demand and arc-length budgets."""

BASE_RING_GAP: dict[str, float] = {
    "root": 0.0,
    "domain": 150.0,
    "goal": 120.0,
    "feature": 102.0,
    "task": 84.0,
}
"""Base distance from a parent to its children's ring, keyed by child type."""

DEFAULT_RING_GAP: float = 250.0
"""Ring gap for child types missing from BASE_RING_GAP."""

ARC_SLACK: float = 0.96
"""Fraction of the sweep the children's arc length may occupy."""

MIN_ARC_SWEEP: float = 0.1
"""Lower bound on the sweep used in the minimum-radius division."""

MAX_RING_GAP_FACTOR: float = 1.65
"""Multiple of the base gap allowed in the maximum ring radius."""

DEMAND_BOOST_SCALE: float = 22.0
"""Radius added per doubling of average child demand over child width."""

DEMAND_BOOST_CAP: float = 0.9
"""Cap on the demand boost as a fraction of the base gap."""

PER_CHILD_RADIUS: float = 4.0
"""Radius added to the maximum ring radius per child."""

SIBLING_GAP_ANGLE: float = 0.08
"""Maximum angular gap (radians) between adjacent siblings."""

SIBLING_GAP_ARC: float = 20.0
"""Arc length of the sibling gap on small rings."""

MIN_USABLE_SWEEP: float = 0.7
"""Fraction of the sweep always left to the children themselves."""

EVEN_WEIGHT: float = 0.5
"""Share of the usable sweep split evenly between siblings."""

DEMAND_WEIGHT: float = 0.35
"""Share of the usable sweep split by subtree demand."""

WIDTH_WEIGHT: float = 0.15
"""Share of the usable sweep split by each child's minimum angle."""

SWEEP_FLOOR_FACTOR: float = 1.08
"""Multiple of a child's minimum angle it is always granted."""

ROOT_START_ANGLE: float = -1.5707963267948966
"""Start angle of the root's sweep (straight up)."""

# ---------------------------------------------------------------------------
# Global scaling
# ---------------------------------------------------------------------------
TARGET_RADIUS_BASE: float = 260.0
"""Base of the compactness budget."""

TARGET_RADIUS_PER_SQRT_NODE: float = 104.0
"""Budget added per square root of the node count."""

TARGET_RADIUS_PER_EXTRA_ROOT_BRANCH: float = 18.0
"""Budget added per root branch beyond FREE_ROOT_BRANCHES."""

FREE_ROOT_BRANCHES: int = 6
"""Root branches covered by the base budget."""

# ---------------------------------------------------------------------------
# Collision relaxation
# ---------------------------------------------------------------------------
COLLISION_PAD_X: float = 14.0
"""Horizontal clearance required between two cards."""

COLLISION_PAD_Y: float = 18.0
"""Vertical clearance required between two cards."""

COLLISION_ITERS: int = 72
"""Pass cap of the main relaxation loop."""

FINISH_ITERS: int = 24
"""Pass cap of the looser finishing loop."""

PUSH_EPSILON: float = 0.02
"""Extra distance added to every push so touching pairs separate."""

MOVE_EPSILON: float = 0.5
"""Total movement in a pass below which relaxation stops."""

SPRING_BACK: float = 0.045
"""Fraction of the distance to its anchor a node recovers per pass."""

MAX_RADIAL_DRIFT: float = 120.0
"""How far beyond its anchor radius a node may drift outward."""

MIN_RADIAL_DRIFT: float = 52.0
"""How far inside its anchor radius a node may drift inward."""

FINISH_EXTRA_DRIFT: float = 28.0
"""Extra outward drift allowed during the finishing loop."""

MIN_SHELL_WIDTH: float = 18.0
"""Minimum thickness of a node's anchor shell."""

CHILD_OUTWARD_GAP: dict[str, float] = {
    "root": 0.0,
    "domain": 92.0,
    "goal": 80.0,
    "feature": 74.0,
    "task": 64.0,
}
"""Minimum radial distance of a node beyond its parent, keyed by node type."""

INNER_CORE_RADIUS: float = 52.0
"""Radius around the root that depth-2 cards may not enter."""

INNER_CORE_DEPTH_STEP: float = 20.0
"""Core radius added per level beyond depth 2."""

# ---------------------------------------------------------------------------
# Incremental placement
# ---------------------------------------------------------------------------
CHILD_BASE_DISTANCE: dict[str, float] = {
    "root": 240.0,
    "domain": 180.0,
    "goal": 160.0,
    "feature": 148.0,
    "task": 142.0,
}
"""Base distance of a new child from its parent, keyed by parent type."""

DEFAULT_CHILD_DISTANCE: float = 150.0
"""Base distance for parent types missing from CHILD_BASE_DISTANCE."""

CANDIDATE_ANGLE_OFFSETS: tuple[float, ...] = (
    0.0, 0.3, -0.3, 0.6, -0.6, 0.9, -0.9, 1.2, -1.2, 1.55, -1.55, 1.9, -1.9,
)
"""Angle offsets (radians) tried around the preferred angle."""

CANDIDATE_DISTANCE_FACTORS: tuple[float, ...] = (1.0, 1.25, 1.55, 1.9, 2.3)
"""Multiples of the base distance tried, nearest first."""

PLACEMENT_CLEARANCE: float = 12.0
"""Clearance to an existing node below which a candidate is in violation."""

CLEARANCE_REWARD_CAP: float = 60.0
"""Clearance beyond which a candidate earns no further reward."""

VIOLATION_PENALTY: float = 10000.0
"""Score added per violated existing node."""

CLEARANCE_WEIGHT: float = 4.0
"""Score removed per unit of (capped) minimum clearance."""

SIBLING_SPREAD: float = 0.6
"""Angular distance (radians) to a sibling below which crowding is scored."""

SIBLING_WEIGHT: float = 120.0
"""Score added per radian of sibling crowding."""

DISTANCE_WEIGHT: float = 0.15
"""Score added per unit of distance from the parent."""

OFFSET_WEIGHT: float = 20.0
"""Score added per radian away from the preferred angle."""

FALLBACK_ANGLE: float = 1.5707963267948966
"""Direction used when no meaningful outward direction exists (straight down)."""

# ---------------------------------------------------------------------------
# Density presets
# ---------------------------------------------------------------------------
DENSITY_FACTORS: dict[str, float] = {
    "compact": 0.85,
    "balanced": 1.0,
    "spacious": 1.2,
}
"""Spacing multiplier per density preset."""

DEFAULT_DENSITY: str = "balanced"
"""Preset used when none is given."""
