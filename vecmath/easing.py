# vecmath/easing.py
"""
Easing functions.

Each maps animation progress x in [0, 1] to an eased value. All of them
return 0 at x == 0 and 1 at x == 1, within float rounding; the back and
elastic families overshoot [0, 1] in between. Inputs outside [0, 1] follow
the same NaN/inf propagation as the scalar wrappers instead of raising. Formulas follow Robert Penner's equations as
published on easings.net.
"""

from __future__ import annotations
from typing import Callable, Dict
import math

from .scalar import cos, exp2, sin, sqrt

PI = math.pi

# Back
C1 = 1.70158
C2 = C1 * 1.525
C3 = C1 + 1.0
# Elastic
C4 = (2.0 * PI) / 3.0
C5 = (2.0 * PI) / 4.5
# Bounce
N1 = 7.5625
D1 = 2.75


def ease_linear(x: float) -> float:
    return x


# =============================================================================
# Sine
# =============================================================================

def ease_in_sine(x: float) -> float:
    return 1.0 - cos((x * PI) / 2.0)

def ease_out_sine(x: float) -> float:
    return sin((x * PI) / 2.0)

def ease_in_out_sine(x: float) -> float:
    return -(cos(PI * x) - 1.0) / 2.0


# =============================================================================
# Polynomial
# =============================================================================

def ease_in_quad(x: float) -> float:
    return x * x

def ease_out_quad(x: float) -> float:
    return 1.0 - (1.0 - x) * (1.0 - x)

def ease_in_out_quad(x: float) -> float:
    if x < 0.5:
        return 2.0 * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 2 / 2.0

def ease_in_cubic(x: float) -> float:
    return x * x * x

def ease_out_cubic(x: float) -> float:
    return 1.0 - (1.0 - x) ** 3

def ease_in_out_cubic(x: float) -> float:
    if x < 0.5:
        return 4.0 * x * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 3 / 2.0

def ease_in_quart(x: float) -> float:
    return x * x * x * x

def ease_out_quart(x: float) -> float:
    return 1.0 - (1.0 - x) ** 4

def ease_in_out_quart(x: float) -> float:
    if x < 0.5:
        return 8.0 * x * x * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 4 / 2.0

def ease_in_quint(x: float) -> float:
    return x * x * x * x * x

def ease_out_quint(x: float) -> float:
    return 1.0 - (1.0 - x) ** 5

def ease_in_out_quint(x: float) -> float:
    if x < 0.5:
        return 16.0 * x * x * x * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 5 / 2.0


# =============================================================================
# Exponential / Circular
# =============================================================================

def ease_in_expo(x: float) -> float:
    if x == 0.0:
        return 0.0
    return exp2(10.0 * x - 10.0)

def ease_out_expo(x: float) -> float:
    if x == 1.0:
        return 1.0
    return 1.0 - exp2(-10.0 * x)

def ease_in_out_expo(x: float) -> float:
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0
    if x < 0.5:
        return exp2(20.0 * x - 10.0) / 2.0
    return (2.0 - exp2(-20.0 * x + 10.0)) / 2.0

def ease_in_circ(x: float) -> float:
    return 1.0 - sqrt(1.0 - x * x)

def ease_out_circ(x: float) -> float:
    return sqrt(1.0 - (x - 1.0) ** 2)

def ease_in_out_circ(x: float) -> float:
    if x < 0.5:
        return (1.0 - sqrt(1.0 - (2.0 * x) ** 2)) / 2.0
    return (sqrt(1.0 - (-2.0 * x + 2.0) ** 2) + 1.0) / 2.0


# =============================================================================
# Back / Elastic / Bounce (overshooting)
# =============================================================================

def ease_in_back(x: float) -> float:
    return C3 * x * x * x - C1 * x * x

def ease_out_back(x: float) -> float:
    return 1.0 + C3 * (x - 1.0) ** 3 + C1 * (x - 1.0) ** 2

def ease_in_out_back(x: float) -> float:
    if x < 0.5:
        return ((2.0 * x) ** 2 * ((C2 + 1.0) * 2.0 * x - C2)) / 2.0
    return ((2.0 * x - 2.0) ** 2 * ((C2 + 1.0) * (x * 2.0 - 2.0) + C2) + 2.0) / 2.0

def ease_in_elastic(x: float) -> float:
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0
    return -exp2(10.0 * x - 10.0) * sin((x * 10.0 - 10.75) * C4)

def ease_out_elastic(x: float) -> float:
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0
    return exp2(-10.0 * x) * sin((x * 10.0 - 0.75) * C4) + 1.0

def ease_in_out_elastic(x: float) -> float:
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0
    if x < 0.5:
        return -(exp2(20.0 * x - 10.0) * sin((20.0 * x - 11.125) * C5)) / 2.0
    return (exp2(-20.0 * x + 10.0) * sin((20.0 * x - 11.125) * C5)) / 2.0 + 1.0

def ease_out_bounce(x: float) -> float:
    if x < 1.0 / D1:
        return N1 * x * x
    elif x < 2.0 / D1:
        x -= 1.5 / D1
        return N1 * x * x + 0.75
    elif x < 2.5 / D1:
        x -= 2.25 / D1
        return N1 * x * x + 0.9375
    else:
        x -= 2.625 / D1
        return N1 * x * x + 0.984375

def ease_in_bounce(x: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - x)

def ease_in_out_bounce(x: float) -> float:
    if x < 0.5:
        return (1.0 - ease_out_bounce(1.0 - 2.0 * x)) / 2.0
    return (1.0 + ease_out_bounce(2.0 * x - 1.0)) / 2.0


# =============================================================================
# Registry
# =============================================================================

EASING_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "linear": ease_linear,
    "ease-in-sine": ease_in_sine,
    "ease-out-sine": ease_out_sine,
    "ease-in-out-sine": ease_in_out_sine,
    "ease-in-quad": ease_in_quad,
    "ease-out-quad": ease_out_quad,
    "ease-in-out-quad": ease_in_out_quad,
    "ease-in-cubic": ease_in_cubic,
    "ease-out-cubic": ease_out_cubic,
    "ease-in-out-cubic": ease_in_out_cubic,
    "ease-in-quart": ease_in_quart,
    "ease-out-quart": ease_out_quart,
    "ease-in-out-quart": ease_in_out_quart,
    "ease-in-quint": ease_in_quint,
    "ease-out-quint": ease_out_quint,
    "ease-in-out-quint": ease_in_out_quint,
    "ease-in-expo": ease_in_expo,
    "ease-out-expo": ease_out_expo,
    "ease-in-out-expo": ease_in_out_expo,
    "ease-in-circ": ease_in_circ,
    "ease-out-circ": ease_out_circ,
    "ease-in-out-circ": ease_in_out_circ,
    "ease-in-back": ease_in_back,
    "ease-out-back": ease_out_back,
    "ease-in-out-back": ease_in_out_back,
    "ease-in-elastic": ease_in_elastic,
    "ease-out-elastic": ease_out_elastic,
    "ease-in-out-elastic": ease_in_out_elastic,
    "ease-in-bounce": ease_in_bounce,
    "ease-out-bounce": ease_out_bounce,
    "ease-in-out-bounce": ease_in_out_bounce,
}

OVERSHOOTING = frozenset({
    "ease-in-back", "ease-out-back", "ease-in-out-back",
    "ease-in-elastic", "ease-out-elastic", "ease-in-out-elastic",
})


def get_easing(name: str) -> Callable[[float], float]:
    """Look up an easing function by its registry name, e.g. 'ease-out-cubic'."""
    try:
        return EASING_FUNCTIONS[name]
    except KeyError:
        known = ", ".join(sorted(EASING_FUNCTIONS))
        raise KeyError(f"Unknown easing {name!r}. Known easings: {known}") from None
