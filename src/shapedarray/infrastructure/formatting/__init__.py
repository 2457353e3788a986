from ._description import describe, full_describe
from ._print_options import PrintOptions, DEFAULT_PRINT_OPTIONS

__all__ = [
    describe.__name__,
    full_describe.__name__,
    PrintOptions.__name__,
    "DEFAULT_PRINT_OPTIONS",
]
