# vecmath/__init__.py
"""
vecmath - small linear algebra toolkit for graphics and animation code.

Components:
- Vec2/Vec3/Vec4 and Point2/Point3: value types for displacements and positions
- Mat2/Mat3/Mat4: row-major square matrices with determinant and row operations
- bezier2/bezier3: cubic Bezier evaluation; Bezier2/Bezier3 for any degree
- lerp/inv_lerp and friends, scalar math wrappers
- Easing functions (sine, quad, cubic, quart, quint, expo, circ, back, elastic, bounce)
"""

from .config import VecmathConfig, get_config, set_config, configure, reset_config

from .scalar import (
    PI, FACTORIALS, INV_FACTORIALS,
    fac, sqrt, ln, log, log2,
    sin, asin, cos, acos, tan, atan, atan2,
    sinh, cosh, tanh, exp2,
    clamp, div, point_derivative,
    deg_to_rad, rad_to_deg,
)

from .vector import (
    InnerSpace,
    Vec2, Vec3, Vec4,
    dot, dist, v_dist, v_angle, cross,
)

from .point import Point2, Point3

from .matrix import (
    LinearTransformation,
    Mat2, Mat3, Mat4,
    det,
)

from .interp import lerp, inv_lerp, lerp2, lerp3, inv_lerp2, inv_lerp3

from .bezier import bezier2, bezier3, Bezier2, Bezier3

from .quaternion import Quat

from .easing import (
    ease_linear,
    ease_in_sine, ease_out_sine, ease_in_out_sine,
    ease_in_quad, ease_out_quad, ease_in_out_quad,
    ease_in_cubic, ease_out_cubic, ease_in_out_cubic,
    ease_in_quart, ease_out_quart, ease_in_out_quart,
    ease_in_quint, ease_out_quint, ease_in_out_quint,
    ease_in_expo, ease_out_expo, ease_in_out_expo,
    ease_in_circ, ease_out_circ, ease_in_out_circ,
    ease_in_back, ease_out_back, ease_in_out_back,
    ease_in_elastic, ease_out_elastic, ease_in_out_elastic,
    ease_in_bounce, ease_out_bounce, ease_in_out_bounce,
    EASING_FUNCTIONS, get_easing,
)

from .packing import to_dict, from_dict, to_array, from_array, to_bytes, from_bytes

__version__ = '0.1.0'

__all__ = [
    # Config
    'VecmathConfig', 'get_config', 'set_config', 'configure', 'reset_config',

    # Scalar
    'PI', 'FACTORIALS', 'INV_FACTORIALS',
    'fac', 'sqrt', 'ln', 'log', 'log2',
    'sin', 'asin', 'cos', 'acos', 'tan', 'atan', 'atan2',
    'sinh', 'cosh', 'tanh', 'exp2',
    'clamp', 'div', 'point_derivative',
    'deg_to_rad', 'rad_to_deg',

    # Vectors / points
    'InnerSpace',
    'Vec2', 'Vec3', 'Vec4',
    'dot', 'dist', 'v_dist', 'v_angle', 'cross',
    'Point2', 'Point3',

    # Matrices
    'LinearTransformation',
    'Mat2', 'Mat3', 'Mat4',
    'det',

    # Interpolation
    'lerp', 'inv_lerp', 'lerp2', 'lerp3', 'inv_lerp2', 'inv_lerp3',

    # Curves
    'bezier2', 'bezier3', 'Bezier2', 'Bezier3',

    'Quat',

    # Easing
    'ease_linear',
    'ease_in_sine', 'ease_out_sine', 'ease_in_out_sine',
    'ease_in_quad', 'ease_out_quad', 'ease_in_out_quad',
    'ease_in_cubic', 'ease_out_cubic', 'ease_in_out_cubic',
    'ease_in_quart', 'ease_out_quart', 'ease_in_out_quart',
    'ease_in_quint', 'ease_out_quint', 'ease_in_out_quint',
    'ease_in_expo', 'ease_out_expo', 'ease_in_out_expo',
    'ease_in_circ', 'ease_out_circ', 'ease_in_out_circ',
    'ease_in_back', 'ease_out_back', 'ease_in_out_back',
    'ease_in_elastic', 'ease_out_elastic', 'ease_in_out_elastic',
    'ease_in_bounce', 'ease_out_bounce', 'ease_in_out_bounce',
    'EASING_FUNCTIONS', 'get_easing',

    # Serialization
    'to_dict', 'from_dict', 'to_array', 'from_array', 'to_bytes', 'from_bytes',
]
