from typing import Generic, List, TypeVar
from .base import CamelModel

T = TypeVar("T")


class PageMeta(CamelModel):
    size: int
    number: int
    total_elements: int
    total_pages: int


class PageResponse(CamelModel, Generic[T]):
    content: List[T]
    page: PageMeta

    @classmethod
    def from_page(cls, page, item_model):
        return cls(
            content=[item_model.model_validate(item) for item in page.content],
            page=PageMeta(
                size=page.size,
                number=page.page,
                total_elements=page.total_elements,
                total_pages=page.total_pages,
            ),
        )
