"""Core algorithms for spacefill.

This module contains the core algorithms for:

- Geometry reductions (endpoint, cursor walk, bounding box)
- Curve expansion (recursive template substitution)
- The library of named example curves and seeds

All functions here are:
- Stateless
- Pure (no side effects, no logging)

Key functions:
- expand: Expand a seed by repeated template substitution
- iter_expand: Lazy form of expand
- substitute: Replace one segment with a transformed template copy
- expected_segment_count: Output size of an expansion
- check_iterations: Validate a substitution round count
- compute_endpoint: Where a chain of segments ends
- compute_bounding_box: Bounding box of a chain of segments

The CurveGenerator orchestrator lives in spacefill.core.generator.
"""

from spacefill.core.expander import (
    check_iterations,
    expand,
    expected_segment_count,
    iter_expand,
    substitute,
)
from spacefill.core.geometry import (
    bounding_box,
    compute_bounding_box,
    compute_endpoint,
    endpoint,
    walk_points,
)
from spacefill.core.library import (
    CurveDefinition,
    SeedDefinition,
    get_curve,
    get_seed,
    get_template,
    list_curves,
    list_seeds,
)

__all__ = [
    # Library
    "CurveDefinition",
    "SeedDefinition",
    # Geometry functions
    "bounding_box",
    "compute_bounding_box",
    "compute_endpoint",
    "endpoint",
    # Expansion functions
    "check_iterations",
    "expand",
    "expected_segment_count",
    "get_curve",
    "get_seed",
    "get_template",
    "iter_expand",
    "list_curves",
    "list_seeds",
    "substitute",
    "walk_points",
]
