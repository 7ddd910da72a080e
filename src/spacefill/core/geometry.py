"""Geometric reductions over sequences of line segments.

This module provides the pure utilities the expander and renderer share:
- Endpoint of a chain of segments
- Running cursor positions along a chain
- Axis-aligned bounding box of a chain (origin always included)

Each segment starts where the previous one ended; the cursor starts at the
origin. All functions are pure and stateless.
"""

from collections.abc import Iterable, Iterator

from spacefill.domain.line import Line


def compute_endpoint(lines: Iterable[Line]) -> tuple[float, float]:
    """Sum the displacements of a chain of segments.

    Args:
        lines: Segments in drawing order

    Returns:
        Tuple of (x, y) where the chain ends. (0.0, 0.0) for no segments.

    Examples:
        >>> from spacefill.domain import make_line
        >>> compute_endpoint([make_line(0, 1), make_line(0, 2)])
        (3.0, 0.0)
    """
    x = 0.0
    y = 0.0
    for line in lines:
        dx, dy = line.displacement()
        x += dx
        y += dy
    return (x, y)


def walk_points(lines: Iterable[Line]) -> Iterator[tuple[float, float]]:
    """Yield the cursor position before each segment, then the final position.

    Args:
        lines: Segments in drawing order

    Yields:
        (x, y) positions, starting with the origin
    """
    x = 0.0
    y = 0.0
    yield (x, y)
    for line in lines:
        dx, dy = line.displacement()
        x += dx
        y += dy
        yield (x, y)


def compute_bounding_box(lines: Iterable[Line]) -> tuple[float, float, float, float]:
    """Calculate the bounding box of the path traced by a chain of segments.

    The origin is always part of the box, so an empty chain yields a
    zero-size box at the origin.

    Args:
        lines: Segments in drawing order

    Returns:
        Tuple of (min_x, min_y, width, height)

    Examples:
        >>> from spacefill.domain import make_line
        >>> compute_bounding_box([make_line(0, 2)])
        (0.0, 0.0, 2.0, 0.0)
    """
    min_x = min_y = max_x = max_y = 0.0
    for x, y in walk_points(lines):
        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y
    return (min_x, min_y, max_x - min_x, max_y - min_y)


# Short names used by host applications
endpoint = compute_endpoint
bounding_box = compute_bounding_box
