import math
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class ApiResponseDto:
    status: int
    data: Any
    message: str = 'Success'


@dataclass
class PageDto:
    page: int
    limit: int
    total_docs: int = 0
    docs: List[Any] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(self.total_docs / self.limit)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1
