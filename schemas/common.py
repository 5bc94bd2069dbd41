from datetime import datetime, timezone
from typing import Annotated, Any, Callable, Generic, TypeVar

from pydantic import AfterValidator, BaseModel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]

T = TypeVar("T")
U = TypeVar("U")


class PaginationMeta(BaseModel):
    total: int
    per_page: int
    current_page: int
    last_page: int


class Paginated(BaseModel, Generic[T]):
    """One page of results plus paging metadata."""

    data: list[T]
    meta: PaginationMeta

    def map(self, fn: Callable[[Any], U]) -> "Paginated[U]":
        return Paginated(data=[fn(item) for item in self.data], meta=self.meta)
