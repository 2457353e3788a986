from .reduction import ArrayMixinReduction
from .memory import ArrayMixinMemory
from .arithmetic import ArrayMixinArithmetic
from .unary import ArrayMixinUnary

__all__ = [
    ArrayMixinReduction.__name__,
    ArrayMixinMemory.__name__,
    ArrayMixinArithmetic.__name__,
    ArrayMixinUnary.__name__,
]
