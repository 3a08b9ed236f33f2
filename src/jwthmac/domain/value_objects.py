# src/jwthmac/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


# --- Identity value objects ----------------------------------------------


@dataclass(frozen=True, slots=True)
class Subject:
    """
    Represents the token subject (the `usr` claim).

    No validation: whatever identifier the issuer vouched for is kept as-is,
    including the empty string.
    """
    value: str

    def __str__(self) -> str:
        return self.value


# --- Access / claims value objects ---------------------------------------


def _normalize(values: Iterable[str]) -> Tuple[str, ...]:
    """
    Normalize an iterable of strings into a tuple.
    If a plain string is passed, treat it as a single-element collection.
    """
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class Scopes:
    """
    Ordered, immutable list of permission names carried by a token.

    Order is preserved exactly as issued; it carries no ranking.
    """
    values: Tuple[str, ...] = ()

    def __init__(self, values: Iterable[str] = ()) -> None:
        object.__setattr__(self, "values", _normalize(values))

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, scope: object) -> bool:
        return scope in self.values

    def contains_any(self, scopes: Iterable[str]) -> bool:
        return any(s in self.values for s in scopes)

    def contains_all(self, scopes: Iterable[str]) -> bool:
        return all(s in self.values for s in scopes)


@dataclass(frozen=True, slots=True)
class ScopeRequirement:
    """
    Declarative description of a scope requirement.

    - any_of:   at least one of these must be present (OR)
    - all_of:   all of these must be present (AND)

    You can use both any_of and all_of together if needed.
    """

    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()

    def __init__(
            self,
            any_of: Iterable[str] | None = None,
            all_of: Iterable[str] | None = None,
    ) -> None:
        object.__setattr__(self, "any_of", _normalize(any_of or ()))
        object.__setattr__(self, "all_of", _normalize(all_of or ()))


def require_scopes(*scopes: str, any_of: bool = True) -> ScopeRequirement:
    if any_of:
        return ScopeRequirement(any_of=scopes)
    return ScopeRequirement(all_of=scopes)
