"""
Flat-buffer kernels used by the shaped array control paths.

- ``reduce_cpu``         : multi-axis fold
- ``stack_cpu``          : stack / unstack / split
- ``broadcast_cpu``      : broadcasting binary operations
- ``vector_math_python`` : elementwise math via the `math` module
- ``vector_math_numpy``  : elementwise math via NumPy ufuncs
"""
