"""Offset/limit pagination parameters and the page metadata returned with lists."""

import math
from typing import Optional, Sequence

from pydantic import BaseModel

from backend.app.core.errors import ValidationFailed

DIRECTION_SAFELIST = ("asc", "desc")


class PageMetadata(BaseModel):
    current_page: Optional[int] = None
    page_size: Optional[int] = None
    first_page: Optional[int] = None
    last_page: Optional[int] = None
    total_records: Optional[int] = None


class Pagination(BaseModel):
    page: int = 1
    limit: int = 20
    sort: str = "id"
    direction: str = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def check(self, sort_safelist: Sequence[str]) -> None:
        errors = {}
        if self.page < 1:
            errors["page"] = "must be greater than zero"
        elif self.page > 10_000_000:
            errors["page"] = "must be a maximum of 10 million"
        if self.limit < 1:
            errors["limit"] = "must be greater than zero"
        elif self.limit > 100:
            errors["limit"] = "must be a maximum of 100"
        if self.sort not in sort_safelist:
            errors["sort"] = "invalid sort value"
        if self.direction not in DIRECTION_SAFELIST:
            errors["direction"] = "invalid direction value"
        if errors:
            raise ValidationFailed(errors)


def calculate_metadata(total_records: int, page: int, limit: int) -> PageMetadata:
    if total_records == 0:
        return PageMetadata()
    return PageMetadata(
        current_page=page,
        page_size=limit,
        first_page=1,
        last_page=math.ceil(total_records / limit),
        total_records=total_records,
    )
