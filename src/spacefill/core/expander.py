"""Recursive curve expansion.

This module grows a curve by substitution: every segment of the seed is
replaced by a copy of the template, scaled so the template's span matches
the segment's length, turned to the segment's direction and mirrored
according to the segment's flags. The copies are substituted again until
the requested number of iterations is reached.

Output size is |seed| * |template| ** iterations, so it grows exponentially.
Use expected_segment_count() and the max_segments ceiling to guard callers
against runaway orders.

All functions are pure: output depends only on (seed, template, iterations).
"""

from collections.abc import Iterable, Iterator, Sequence

from spacefill.domain import Line, Template
from spacefill.exceptions import InvalidIterationCount, SegmentLimitExceeded


def check_iterations(iterations: int) -> int:
    """Validate a substitution round count.

    Raises:
        InvalidIterationCount: If iterations is not a non-negative int
    """
    # bool is an int subclass but never a meaningful count
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidIterationCount(iterations, "must be an integer")
    if iterations < 0:
        raise InvalidIterationCount(iterations)
    return iterations


def expected_segment_count(seed_size: int, template_size: int, iterations: int) -> int:
    """Number of segments expand() will produce.

    Args:
        seed_size: Number of seed segments
        template_size: Number of template segments
        iterations: Substitution rounds

    Returns:
        seed_size * template_size ** iterations

    Raises:
        InvalidIterationCount: If iterations is negative or not an integer
    """
    check_iterations(iterations)
    return seed_size * template_size**iterations


def substitute(source: Line, template: Template, depth: int) -> Iterator[Line]:
    """Replace one segment with a transformed copy of the template.

    Each template segment is scaled by source.length / template.span, rebased
    so the template's net rotation lies along 0 degrees, mirrored by the
    source's flags and then turned by the source's rotation. With depth > 0
    every produced segment is substituted again instead of being yielded.

    A source with mirror_reverse walks the template backwards; mirror_flip
    and mirror_reverse each toggle their own flag on the child and each
    negate its rotation, so with both set the negations cancel.

    Args:
        source: Segment being replaced (absolute rotation and length)
        template: Substitution rule
        depth: Remaining substitution rounds below this one

    Yields:
        Leaf segments in drawing order
    """
    template_lines: Iterable[Line] = (
        reversed(template.lines) if source.mirror_reverse else template.lines
    )

    for template_line in template_lines:
        scale = template_line.length / template.span
        length = scale * source.length

        rotation = template_line.rotation - template.net_rotation
        mirror_reverse = template_line.mirror_reverse
        mirror_flip = template_line.mirror_flip

        if source.mirror_flip:
            mirror_flip = not mirror_flip
            rotation = -rotation
        if source.mirror_reverse:
            mirror_reverse = not mirror_reverse
            rotation = -rotation

        rotation += source.rotation

        line = Line(
            rotation=rotation,
            length=length,
            mirror_reverse=mirror_reverse,
            mirror_flip=mirror_flip,
        )

        if depth > 0:
            yield from substitute(line, template, depth - 1)
        else:
            yield line


def iter_expand(
    seed: Sequence[Line],
    template: Template,
    iterations: int,
    max_segments: int | None = None,
) -> Iterator[Line]:
    """Lazily expand a seed, validating arguments before the first segment.

    Args:
        seed: Starting segments (iteration 0 output)
        template: Substitution rule
        iterations: Number of substitution rounds (>= 0)
        max_segments: Refuse expansions that would exceed this many segments

    Returns:
        Iterator over the expanded segments in drawing order

    Raises:
        InvalidIterationCount: If iterations is negative or not an integer
        SegmentLimitExceeded: If the output would exceed max_segments
    """
    check_iterations(iterations)

    if max_segments is not None:
        expected = expected_segment_count(len(seed), len(template.lines), iterations)
        if expected > max_segments:
            raise SegmentLimitExceeded(expected, max_segments)

    return _expand(tuple(seed), template, iterations)


def _expand(seed: tuple[Line, ...], template: Template, iterations: int) -> Iterator[Line]:
    if iterations == 0:
        yield from seed
        return

    for line in seed:
        yield from substitute(line, template, iterations - 1)


def expand(
    seed: Sequence[Line],
    template: Template,
    iterations: int,
    max_segments: int | None = None,
) -> list[Line]:
    """Expand a seed by repeated template substitution.

    Args:
        seed: Starting segments; pass template.lines for the classic curve
        template: Substitution rule
        iterations: Number of substitution rounds (>= 0)
        max_segments: Refuse expansions that would exceed this many segments

    Returns:
        List of len(seed) * len(template.lines) ** iterations segments with
        absolute rotations and lengths. iterations == 0 returns the seed.

    Raises:
        InvalidIterationCount: If iterations is negative or not an integer
        SegmentLimitExceeded: If the output would exceed max_segments

    Examples:
        >>> from spacefill.domain import make_line, make_template
        >>> koch = make_template([make_line(0, 1), make_line(60, 1),
        ...                       make_line(-60, 1), make_line(0, 1)])
        >>> len(expand(koch.lines, koch, 2))
        64
    """
    return list(iter_expand(seed, template, iterations, max_segments))
