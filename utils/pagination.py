"""Page requests and page results shared by repositories, services and both APIs."""

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, TypeVar
from config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")

ASC = "asc"
DESC = "desc"


class InvalidPageRequest(ValueError):
    pass


@dataclass(frozen=True)
class Order:
    field: str
    direction: str = ASC

    @property
    def descending(self) -> bool:
        return self.direction == DESC

    @classmethod
    def parse(cls, value: str) -> "Order":
        """Parses the `field[,asc|desc]` query syntax."""
        parts = [part.strip() for part in value.split(",")]
        if not parts[0]:
            raise InvalidPageRequest(f"Invalid sort '{value}'")
        direction = parts[1].lower() if len(parts) > 1 and parts[1] else ASC
        if direction not in (ASC, DESC):
            raise InvalidPageRequest(f"Invalid sort direction '{parts[1]}'")
        return cls(parts[0], direction)


@dataclass(frozen=True)
class Pageable:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: tuple = field(default_factory=tuple)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int = 0, size: int = DEFAULT_PAGE_SIZE, sort: Optional[Sequence] = None) -> "Pageable":
        if page is None or page < 0:
            raise InvalidPageRequest("Page index must not be less than zero")
        if size is None or size < 1 or size > MAX_PAGE_SIZE:
            raise InvalidPageRequest(f"Page size must be between 1 and {MAX_PAGE_SIZE}")
        orders = tuple(
            order if isinstance(order, Order) else Order.parse(order)
            for order in (sort or ())
        )
        return cls(page, size, orders)

    def with_sort(self, sort) -> "Pageable":
        return Pageable(self.page, self.size, tuple(sort))


@dataclass
class Page(Generic[T]):
    content: List[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 1
