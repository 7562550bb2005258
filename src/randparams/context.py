"""Call-site description used in reproducibility log lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CallSiteContext:
    """Where a value is generated: declaring scope, member and parameter.

    ``describe()`` renders ``scope#member#parameter``, for example
    ``TestParser#test_roundtrip#payload``.
    """

    scope: str
    member: str
    parameter: str

    def __post_init__(self) -> None:
        for field_name in ("scope", "member", "parameter"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
            if not value:
                raise ValueError(f"{field_name} must not be empty")

    def describe(self) -> str:
        return f"{self.scope}#{self.member}#{self.parameter}"

    def __str__(self) -> str:
        return self.describe()
