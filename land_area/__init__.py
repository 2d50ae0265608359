"""Land Area Calculator.

Computes the area of a land plot from surveyed polygon vertices, either
planar metre coordinates or GPS readings in degree-minute-second form,
and reports it in square metres, square feet and the regional
Bangladeshi land units (katha, bigha, decimal/shotok, kani, acre).
"""

__version__ = "0.1.0"
