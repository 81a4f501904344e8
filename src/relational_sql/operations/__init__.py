"""High-level operation builders."""

from .batch import CommandBatchBuilder
from .commands import CommandBuilder

__all__ = ["CommandBatchBuilder", "CommandBuilder"]
