"""
Method-call to SQL function translators.

Each translator maps one Python callable onto a SQL function by name. The
arguments arrive already rendered as SQL text; translation is a textual
substitution and never inspects them.
"""

from typing import Any, Iterable, Optional, Protocol, Sequence


class MethodCallTranslator(Protocol):
    """Protocol for method-call translators."""

    def translate(
        self, owner: Any, method_name: str, arguments: Sequence[str]
    ) -> Optional[str]: ...


class StaticMethodCallTranslator:
    """
    Translates a module-level or static function, whatever its overload.

    Example:
        >>> import math
        >>> StaticMethodCallTranslator(math, "floor", "FLOOR").translate(math, "floor", ["@p0"])
        'FLOOR(@p0)'
    """

    def __init__(self, owner: Any, method_name: str, sql_function: str):
        self.owner = owner
        self.method_name = method_name
        self.sql_function = sql_function

    def translate(
        self, owner: Any, method_name: str, arguments: Sequence[str]
    ) -> Optional[str]:
        if owner is not self.owner or method_name != self.method_name:
            return None
        return f"{self.sql_function}({', '.join(arguments)})"


class ParameterlessInstanceMethodCallTranslator:
    """
    Translates an instance method taking no arguments besides the instance.

    The instance is passed as the single element of ``arguments``.

    Example:
        >>> ParameterlessInstanceMethodCallTranslator(str, "upper", "UPPER").translate(str, "upper", ["[name]"])
        'UPPER([name])'
    """

    def __init__(self, owner_type: type, method_name: str, sql_function: str):
        self.owner_type = owner_type
        self.method_name = method_name
        self.sql_function = sql_function

    def translate(
        self, owner: Any, method_name: str, arguments: Sequence[str]
    ) -> Optional[str]:
        if owner is not self.owner_type or method_name != self.method_name:
            return None
        if len(arguments) != 1:
            return None
        return f"{self.sql_function}({arguments[0]})"


class CompositeMethodCallTranslator:
    """Tries each registered translator in order and returns the first match."""

    def __init__(self, translators: Iterable[MethodCallTranslator] = ()):
        self.translators = list(translators)

    def register(self, translator: MethodCallTranslator) -> None:
        self.translators.append(translator)

    def translate(
        self, owner: Any, method_name: str, arguments: Sequence[str]
    ) -> Optional[str]:
        for translator in self.translators:
            sql = translator.translate(owner, method_name, arguments)
            if sql is not None:
                return sql
        return None
