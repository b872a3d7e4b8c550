"""Query options for the list endpoints.

A field left as ``None`` is omitted from the query string entirely; it is
never sent as a zero or empty default.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProductListOptions:
    site_id: str | None = None
    limit: int | None = None
    offset: int | None = None
    category: str | None = None
    tag: str | None = None

    def to_params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {}
        if self.limit is not None:
            params["limit"] = self.limit
        if self.offset is not None:
            params["offset"] = self.offset
        if self.category:
            params["category"] = self.category
        if self.tag:
            params["tag"] = self.tag
        return params


@dataclass(frozen=True, slots=True)
class OrderListOptions:
    site_id: str | None = None
    limit: int | None = None
    offset: int | None = None
    status: str | None = None
    customer_id: str | None = None

    def to_params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {}
        if self.limit is not None:
            params["limit"] = self.limit
        if self.offset is not None:
            params["offset"] = self.offset
        if self.status:
            params["status"] = self.status
        if self.customer_id:
            params["customerId"] = self.customer_id
        return params
