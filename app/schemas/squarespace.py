"""Pydantic schemas for Squarespace Commerce resources.

These mirror the upstream JSON. The service never owns these records; it
decodes them for shape checks and hands them back out unchanged.
"""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.common import CamelSchema, Pagination


class Money(CamelSchema):
    """Decimal amount as a string plus an ISO currency code."""

    value: str = ""
    currency: str = ""


class SystemData(CamelSchema):
    """Creation / modification / publish timestamps (epoch millis)."""

    created_on: int = 0
    modified_on: int = 0
    published_on: int = 0


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class ProductImage(CamelSchema):
    asset_id: str = ""
    url: str = ""
    description: str | None = None
    mime_type: str = ""
    width: int = 0
    height: int = 0


class ProductPricing(CamelSchema):
    base_price: Money | None = None
    compare_at_price: Money | None = None
    sale_price: Money | None = None
    on_sale: bool = False


class ProductStock(CamelSchema):
    """Stock tracking flags for a variant; quantity is absent when untracked."""

    track_inventory: bool = False
    quantity: int | None = None
    allow_backorder: bool = False
    unlimited: bool = False


class ProductAttribute(CamelSchema):
    name: str = ""
    value: str = ""


class VariantOption(CamelSchema):
    name: str = ""
    option: str = ""


class RelatedProduct(CamelSchema):
    product_id: str = ""
    variant_id: str = ""


class SeoData(CamelSchema):
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    image: str | None = None


class FieldValidation(CamelSchema):
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


class CustomFormField(CamelSchema):
    field_id: str = ""
    type: str = ""
    label: str = ""
    required: bool = False
    choices: list[str] | None = None
    validation: FieldValidation | None = None


class CustomForm(CamelSchema):
    form_id: str = ""
    form_fields: list[CustomFormField] = Field(default=[], alias="fields")


class ProductVariant(CamelSchema):
    """A purchasable variant nested under a product."""

    id: str = ""
    sku: str = ""
    name: str = ""
    description: str | None = None
    images: list[ProductImage] = []
    pricing: ProductPricing = Field(default_factory=ProductPricing)
    stock: ProductStock = Field(default_factory=ProductStock)
    visibility: str = ""
    attributes: list[ProductAttribute] | None = None
    variants: list[VariantOption] | None = None


class Product(CamelSchema):
    """A catalog product. Upstream names the variant list ``products``."""

    id: str = ""
    type: str = ""
    variant_id: str = ""
    custom_form: CustomForm | None = None
    categories: list[str] | None = None
    tags: list[str] | None = None
    products: list[ProductVariant] = []
    related_products: list[RelatedProduct] | None = None
    seo_data: SeoData | None = None
    system_data: SystemData = Field(default_factory=SystemData)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class Address(CamelSchema):
    """Mailing address; also the shape of a customer profile."""

    first_name: str = ""
    last_name: str = ""
    company: str | None = None
    address_line1: str = ""
    address_line2: str | None = None
    city: str = ""
    state: str | None = None
    postal_code: str = ""
    country: str = ""
    phone: str | None = None


class OrderCustomization(CamelSchema):
    field_name: str = ""
    value: str = ""


class OrderLineItem(CamelSchema):
    product_id: str = ""
    variant_id: str = ""
    sku: str = ""
    product_name: str = ""
    variant_name: str | None = None
    quantity: int = 0
    unit_price: Money | None = None
    total_price: Money | None = None
    customizations: list[OrderCustomization] | None = None


class OrderTotals(CamelSchema):
    subtotal: Money | None = None
    tax: Money | None = None
    shipping: Money | None = None
    discount: Money | None = None
    total: Money | None = None


class TrackingInfo(CamelSchema):
    carrier: str = ""
    tracking_number: str = ""
    tracking_url: str | None = None


class OrderFulfillment(CamelSchema):
    id: str = ""
    type: str = ""
    status: str = ""
    tracking_info: TrackingInfo | None = None
    line_items: list[str] = []


class Order(CamelSchema):
    """A commerce order.

    Every field has a default so a partial order submitted for creation still
    parses; the id, order number and totals are assigned upstream. An explicit
    null for a scalar or list field reads as its empty value.
    """

    id: str = ""
    order_number: str = ""
    customer_id: str | None = None
    email: str = ""
    billing_address: Address | None = None
    shipping_address: Address | None = None
    line_items: list[OrderLineItem] = []
    totals: OrderTotals | None = None
    status: str = ""
    fulfillments: list[OrderFulfillment] = []
    system_data: SystemData | None = None

    @field_validator(
        "id", "order_number", "email", "status", "line_items", "fulfillments", mode="before"
    )
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return [] if info.field_name in ("line_items", "fulfillments") else ""
        return value


# ---------------------------------------------------------------------------
# Wire envelopes
# ---------------------------------------------------------------------------


class ProductListResponse(CamelSchema):
    result: list[Product] = []
    pagination: Pagination | None = None


class OrderListResponse(CamelSchema):
    result: list[Order] = []
    pagination: Pagination | None = None


class UpstreamErrorBody(CamelSchema):
    """Error document returned by the commerce API on a 4xx/5xx."""

    type: str
    message: str
    details: Any | None = None


class InventoryUpdate(CamelSchema):
    """Body of a stock quantity update."""

    quantity: int


class InventoryUpdateResult(CamelSchema):
    product_id: str
    quantity: int
