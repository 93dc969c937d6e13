import math
from dataclasses import dataclass

from app.schemas.listing import PageInfo


@dataclass(frozen=True)
class Pagination:
    page: int
    page_size: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def total_pages(self, total: int) -> int:
        # zero matches -> zero pages
        return math.ceil(total / self.page_size)

    def page_info(self, total: int) -> PageInfo:
        # page is reported as requested, even past the last page
        return PageInfo(
            current=self.page,
            page_size=self.page_size,
            total=total,
            total_pages=self.total_pages(total),
        )
