"""
Filter / sort / pagination intent for list endpoints, parsed from raw query parameters.
Parsing never fails: anything unusable falls back to its default.
"""
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from utils.case import to_snake_key

DEFAULT_SORT_FIELD = "created_at"
DEFAULT_PER_PAGE = 15
TRUTHY = "true"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class QuerySpec(BaseModel):
    search: Optional[str] = None
    include_trashed: bool = False
    sort_field: str = DEFAULT_SORT_FIELD
    sort_direction: SortDirection = SortDirection.DESC
    paginate: bool = False
    page: int = Field(1, ge=1)
    per_page: int = Field(DEFAULT_PER_PAGE, gt=0)

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        paginate_default: bool = False,
        per_page_default: int = DEFAULT_PER_PAGE,
    ) -> "QuerySpec":
        """
        Build from query parameters (keys in camelCase or snake_case):
        search, trashed, sort_by, sort_direction, paginate, per_page, page.
        """
        p = {to_snake_key(k): v for k, v in params.items()}
        if per_page_default < 1:
            per_page_default = DEFAULT_PER_PAGE

        paginate = _flag(p["paginate"]) if "paginate" in p else paginate_default
        return cls(
            search=_text(p.get("search")) or None,
            include_trashed=_flag(p.get("trashed")),
            sort_field=_text(p.get("sort_by")) or DEFAULT_SORT_FIELD,
            sort_direction=_direction(p.get("sort_direction")),
            paginate=paginate,
            page=_positive_int(p.get("page"), 1),
            per_page=_positive_int(p.get("per_page"), per_page_default),
        )


def _flag(value: Any) -> bool:
    return value is True or value == TRUTHY


def _direction(value: Any) -> SortDirection:
    if isinstance(value, str) and value.lower() in (SortDirection.ASC.value, SortDirection.DESC.value):
        return SortDirection(value.lower())
    return SortDirection.DESC


def _positive_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    return n if n > 0 else default


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""
