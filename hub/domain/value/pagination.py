"""Page metadata for paginated listings."""

import math

from pydantic import Field

from hub.domain.value.common import ValueObject

MAX_PAGE_SIZE = 100


class Pagination(ValueObject):
    """Metadata describing one page of a listing."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1, le=MAX_PAGE_SIZE)
    total: int = Field(ge=0)
    pages: int = Field(ge=0)


def page_offset(page: int, limit: int) -> int:
    """Offset of the first item on ``page``."""
    return (page - 1) * limit


def paginate(total: int, page: int, limit: int) -> Pagination:
    """Build page metadata for a listing.

    ``page`` and ``limit`` are validated at the API boundary; an
    out-of-range page is still described truthfully (it is simply empty).

    Args:
        total: Total number of items matching the query
        page: 1-based page number
        limit: Page size

    Returns:
        Pagination with ``pages = ceil(total / limit)``
    """
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit),
    )
