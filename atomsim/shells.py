"""
Visual electron shell allocation.

The distribution is a simplified, deterministic-shape layout used only for
drawing orbiting electrons around a nucleus. It is not a physical model:
shell capacities are capped at (2, 8, 8, 18) and atoms are drawn with at most
24 electrons.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import random
from typing import List, Optional

SHELL_CAPACITIES = (2, 8, 8, 18)
SHELL_RADII_PX = (30.0, 50.0, 70.0, 90.0)
MAX_VISUAL_ELECTRONS = 24
EVEN_SHELL_SPEED = 0.8  # rad/s
ODD_SHELL_SPEED = -0.5  # rad/s
SHELL_SPEED_FALLOFF = 0.1
SPEED_JITTER = 0.1  # +/- rad/s, 10% of a 1.0 rad/s base


@dataclass
class Electron:
    shell: int
    radius: float
    angle: float
    speed: float  # radians per second, signed


def shell_counts(atomic_number: int) -> List[int]:
    """Number of electrons placed in each shell, innermost first."""

    remaining = max(0, min(atomic_number, MAX_VISUAL_ELECTRONS))
    counts: List[int] = []
    for capacity in SHELL_CAPACITIES:
        if remaining <= 0:
            break
        in_shell = min(remaining, capacity)
        counts.append(in_shell)
        remaining -= in_shell
    return counts


def base_speed(shell: int) -> float:
    direction = EVEN_SHELL_SPEED if shell % 2 == 0 else ODD_SHELL_SPEED
    return direction * (1.0 - shell * SHELL_SPEED_FALLOFF)


def allocate_electrons(atomic_number: int, rng: Optional[random.Random] = None) -> List[Electron]:
    """
    Build the orbiting electrons for an atom.

    Electrons within a shell of size k are spaced evenly, electron i starting
    at angle 2*pi*i/k. Speeds carry a small random jitter, so only the shape
    of the allocation is reproducible.
    """
    rng = rng or random.Random()
    electrons: List[Electron] = []
    for shell, count in enumerate(shell_counts(atomic_number)):
        radius = SHELL_RADII_PX[shell]
        for i in range(count):
            angle = 2.0 * math.pi * i / count
            speed = base_speed(shell) + rng.uniform(-SPEED_JITTER, SPEED_JITTER)
            electrons.append(Electron(shell=shell, radius=radius, angle=angle, speed=speed))
    return electrons
