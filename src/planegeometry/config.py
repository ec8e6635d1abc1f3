"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for global numeric constants.

Why is this file needed?
------------------------
1. Precision: every derived quantity is single precision. Keeping the dtype in
   one place keeps Point, Vector and Triangle in agreement.
2. Units: all angles are reported in degrees, so the conversion factor and the
   reference angles live here instead of being repeated as literals.

Exports:
    FLOAT_DTYPE (type): numpy scalar type used for coordinates and results.
    RIGHT_ANGLE (float32): 90 degrees.
    STRAIGHT_ANGLE (float32): 180 degrees, also the interior angle sum of a triangle.
    PI (float32): pi in single precision.
    ANGLE_SUM_TOLERANCE (float): accepted deviation of a triangle's angle sum.
    DISPLAY_DECIMALS (int): decimals used when angles are rounded for display.
"""
import numpy as np

# Global Constants
FLOAT_DTYPE = np.float32

RIGHT_ANGLE = FLOAT_DTYPE(90.0)
STRAIGHT_ANGLE = FLOAT_DTYPE(180.0)
PI = FLOAT_DTYPE(np.pi)

ANGLE_SUM_TOLERANCE: float = 1e-3
DISPLAY_DECIMALS: int = 1
