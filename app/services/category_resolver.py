import re
from dataclasses import dataclass
from typing import Union

# integer primary keys; longer digit runs cannot be ids and are looked up as names
_CATEGORY_ID_RE = re.compile(r"[0-9]{1,18}")


@dataclass(frozen=True)
class NoCategoryFilter:
    pass


@dataclass(frozen=True)
class CategoryById:
    category_id: int


@dataclass(frozen=True)
class CategoryNotFound:
    token: str


CategoryFilter = Union[NoCategoryFilter, CategoryById, CategoryNotFound]


def is_category_id(token: str) -> bool:
    return _CATEGORY_ID_RE.fullmatch(token) is not None


def resolve_category(token: str, store) -> CategoryFilter:
    """
    Map a user supplied category token to a filter.

    - empty token              -> NoCategoryFilter
    - digits                   -> CategoryById (used as-is, not checked for existence)
    - anything else            -> case-insensitive name lookup via the store
    - name with no match       -> CategoryNotFound
    """
    token = (token or "").strip()
    if not token:
        return NoCategoryFilter()

    if is_category_id(token):
        return CategoryById(int(token))

    category = store.find_category_by_name(token)
    if category is None:
        return CategoryNotFound(token)
    return CategoryById(category.id)
