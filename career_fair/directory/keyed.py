"""
Dicts of companies or majors keyed by a chosen field.

An unknown key selector is reported through the returned `KeyedLookup`
instead of an empty or missing mapping, so callers cannot confuse it with
"no records".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Iterable, Optional, Type, TypeVar, Union

from career_fair.directory.models import Company, CompanyKey, Major, MajorKey
from career_fair.utils.logger import get_logger

logger = get_logger("directory.keyed")

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

KeySelector = Union[Enum, str, int]


class InvalidKeySelectorError(ValueError):
    pass


@dataclass(frozen=True)
class KeyedLookup(Generic[T]):
    mapping: Optional[Dict[str, T]] = None
    error: Optional[InvalidKeySelectorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Dict[str, T]:
        if self.error is not None:
            raise self.error
        return self.mapping


def resolve_key(key: KeySelector, key_type: Type[E]) -> Optional[E]:
    """
    Accept an enum member, its string value, or the legacy integer code
    (position in the enum: 0, 1, ...). Returns None when nothing matches.
    """
    if isinstance(key, key_type):
        return key
    # bool is an int subclass; True/False are not selectors
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        members = list(key_type)
        return members[key] if 0 <= key < len(members) else None
    if isinstance(key, str):
        try:
            return key_type(key)
        except ValueError:
            return None
    return None


def _invalid(key: KeySelector, key_type: Type[Enum]) -> KeyedLookup:
    valid = ", ".join(m.value for m in key_type)
    logger.warning(f"Invalid {key_type.__name__} selector: {key!r}")
    return KeyedLookup(error=InvalidKeySelectorError(
        f"Invalid {key_type.__name__} selector {key!r}; expected one of: {valid}"
    ))


def build_company_lookup(companies: Iterable[Company], key: KeySelector) -> KeyedLookup[Company]:
    """
    Key companies by name or by table number

    Args:
        companies: Company records
        key: CompanyKey, its value, or legacy code (0 = name, 1 = table number)

    Returns:
        KeyedLookup: mapping, or error for an invalid selector. Later
        records win on duplicate keys.
    """
    resolved = resolve_key(key, CompanyKey)
    if resolved is None:
        return _invalid(key, CompanyKey)
    if resolved is CompanyKey.NAME:
        return KeyedLookup(mapping={c.name: c for c in companies})
    return KeyedLookup(mapping={c.table_num: c for c in companies})


def build_major_lookup(majors: Iterable[Major], key: KeySelector) -> KeyedLookup[Major]:
    """
    Key majors by name or by abbreviation

    Args:
        majors: Major records
        key: MajorKey, its value, or legacy code (0 = name, 1 = abbreviation)

    Returns:
        KeyedLookup: mapping, or error for an invalid selector
    """
    resolved = resolve_key(key, MajorKey)
    if resolved is None:
        return _invalid(key, MajorKey)
    if resolved is MajorKey.NAME:
        return KeyedLookup(mapping={m.name: m for m in majors})
    return KeyedLookup(mapping={m.abbreviation: m for m in majors})
