"""SQL Server method-call translators."""

import math

from .base import (
    CompositeMethodCallTranslator,
    ParameterlessInstanceMethodCallTranslator,
    StaticMethodCallTranslator,
)


class MathFloorTranslator(StaticMethodCallTranslator):
    """``math.floor(x)`` -> ``FLOOR(x)``."""

    def __init__(self) -> None:
        super().__init__(math, "floor", "FLOOR")


class StringToUpperTranslator(ParameterlessInstanceMethodCallTranslator):
    """``s.upper()`` -> ``UPPER(s)``."""

    def __init__(self) -> None:
        super().__init__(str, "upper", "UPPER")


class SqlServerCompositeMethodCallTranslator(CompositeMethodCallTranslator):
    def __init__(self) -> None:
        super().__init__([MathFloorTranslator(), StringToUpperTranslator()])
