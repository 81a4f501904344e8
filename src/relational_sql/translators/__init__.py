"""Method-call to SQL function translators."""

from .base import (
    CompositeMethodCallTranslator,
    MethodCallTranslator,
    ParameterlessInstanceMethodCallTranslator,
    StaticMethodCallTranslator,
)
from .sqlserver import (
    MathFloorTranslator,
    SqlServerCompositeMethodCallTranslator,
    StringToUpperTranslator,
)

__all__ = [
    "MethodCallTranslator",
    "StaticMethodCallTranslator",
    "ParameterlessInstanceMethodCallTranslator",
    "CompositeMethodCallTranslator",
    "MathFloorTranslator",
    "StringToUpperTranslator",
    "SqlServerCompositeMethodCallTranslator",
]
