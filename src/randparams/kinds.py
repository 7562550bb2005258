"""Semantic value kinds and the mapping from Python annotations to kinds.

Python has a single ``int`` and a single ``float`` type, so the narrower
widths are requested through :func:`typing.NewType` markers: annotate a
parameter with :data:`Long`, :data:`BigInteger` or :data:`Float32` to select
the corresponding bounds.
"""

from __future__ import annotations

import random
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, NewType

from .generator import SeededGenerator

Long = NewType("Long", int)
BigInteger = NewType("BigInteger", int)
Float32 = NewType("Float32", float)


class ValueKind(Enum):
    """Enumeration of value kinds the engine can generate."""

    RANDOM = "random"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BIG_INTEGER = "big-integer"
    BIG_DECIMAL = "big-decimal"
    BYTES = "bytes"
    STRING = "string"

    @classmethod
    def parse(cls, name: str) -> ValueKind:
        """Return the kind for ``name`` (``"big-integer"``, ``"BIG_INTEGER"``...).

        Raises
        ------
        ValueError
            If ``name`` does not match any kind.
        """

        key = name.strip().lower().replace("_", "-")
        for kind in cls:
            if kind.value == key:
                return kind
        raise ValueError(f"Unknown value kind: '{name}'")


_ANNOTATION_KINDS: Mapping[Any, ValueKind] = MappingProxyType(
    {
        random.Random: ValueKind.RANDOM,
        SeededGenerator: ValueKind.RANDOM,
        int: ValueKind.INT,
        Long: ValueKind.LONG,
        BigInteger: ValueKind.BIG_INTEGER,
        float: ValueKind.DOUBLE,
        Float32: ValueKind.FLOAT,
        Decimal: ValueKind.BIG_DECIMAL,
        bytes: ValueKind.BYTES,
        str: ValueKind.STRING,
    }
)


def kind_for(annotation: Any) -> ValueKind | None:
    """Return the kind requested by ``annotation`` or ``None`` if unknown."""

    if isinstance(annotation, ValueKind):
        return annotation
    try:
        return _ANNOTATION_KINDS.get(annotation)
    except TypeError:  # unhashable annotation objects
        return None


__all__ = ["BigInteger", "Float32", "Long", "ValueKind", "kind_for"]
