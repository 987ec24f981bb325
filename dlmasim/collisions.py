"""Collision windows of hard spheres moving along a straight displacement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

NO_COLLISION = -2.0
_TOUCHING = 1e-4


@dataclass(frozen=True)
class Collision:
    """Window of fractional times during which particle ``i`` touches ``j``.

    Both times are ``NO_COLLISION`` when the pair never comes into contact
    ahead of the moving particle, and both are 0 when they already touch.
    """

    i: int
    j: int
    min_time: float
    max_time: float


def collision_window(ref, nb, dr, alpha: float, box) -> Collision:
    """Times, as fractions of ``dr``, at which ``ref`` is within contact of ``nb``.

    The contact distance is the mean diameter widened by the factor
    ``1 + alpha``; separations use the box's minimum-image convention.
    """
    diff = [
        box.periodic_distance(b, a, axis)
        for axis, (a, b) in enumerate(zip(ref.pos, nb.pos))
    ]
    q = sum(d * s for d, s in zip(diff, dr))
    d_mag_2 = sum(s * s for s in dr)
    diff_2 = sum(d * d for d in diff)
    contact = (1.0 + alpha) * 0.5 * (ref.diameter + nb.diameter)
    beta = q * q - d_mag_2 * (diff_2 - contact * contact)

    if d_mag_2 == 0 or beta < 0:
        return Collision(ref.id, nb.id, NO_COLLISION, NO_COLLISION)

    root = math.sqrt(beta)
    first = (q - root) / d_mag_2
    second = (q + root) / d_mag_2
    if first < 0.0:
        return Collision(ref.id, nb.id, NO_COLLISION, NO_COLLISION)
    if abs(first) < _TOUCHING:
        return Collision(ref.id, nb.id, 0.0, 0.0)
    return Collision(ref.id, nb.id, first, second)


def overlap_fraction(
    hard_sphere: Sequence[Collision], bonds: Sequence[Collision], rng
) -> float:
    """Fraction of a step that an aggregate may travel.

    The step stops at the first hard-sphere contact.  When two bonding
    windows overlap before that, a point inside the earliest shared window
    is drawn with ``rng.random()`` so the aggregate ends up touching both.
    """
    t_c = 1.0
    for collision in hard_sphere:
        if 0.0 <= collision.min_time < t_c:
            t_c = collision.min_time

    start = end = t_c
    shared = False
    for k, first in enumerate(bonds):
        min_i, max_i = first.min_time, first.max_time
        if not 0.0 < min_i < t_c:
            continue
        for second in bonds[k + 1:]:
            min_j, max_j = second.min_time, second.max_time
            if min_j <= 0.0:
                continue
            if min_j < min_i < max_j:
                shared = True
                if min_j < start:
                    start = min_j
                    end = min(max_i, max_j)
            if min_i < min_j < max_i:
                shared = True
                if min_i < start:
                    start = min_i
                    end = min(max_i, max_j)

    if start > t_c:
        shared = False
    end = min(end, t_c)

    if shared:
        return start + rng.random() * (end - start)
    return t_c