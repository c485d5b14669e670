"""API schemas for the catalog API.

Pydantic models for response validation and OpenAPI documentation.
Serializers produce plain dictionaries keyed by the wire names
(``_links``, ``_meta``, ``totalCount``...), which these models accept
through field aliases.
"""

from pydantic import BaseModel, ConfigDict, Field


class AliasedModel(BaseModel):
    """Base model that accepts both field names and wire aliases."""

    model_config = ConfigDict(populate_by_name=True)


# ============================================================================
# Common Schemas
# ============================================================================


class LinkSchema(BaseModel):
    """Hypermedia link."""

    href: str = Field(..., description="Absolute URL")


class SelfLinksSchema(AliasedModel):
    """Links block with only a self link."""

    self_: LinkSchema = Field(..., alias="self")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Catalog Schemas
# ============================================================================


class CategorySchema(AliasedModel):
    """Category summary."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    links: SelfLinksSchema = Field(..., alias="_links")


class TagSchema(AliasedModel):
    """Tag summary."""

    id: int = Field(..., description="Tag identifier")
    name: str = Field(..., description="Tag name")
    links: SelfLinksSchema = Field(..., alias="_links")


class PriceSchema(BaseModel):
    """Current and previous price."""

    new: int = Field(..., description="Current price")
    old: int | None = Field(default=None, description="Previous price, null if none")


class ProductItemLinksSchema(AliasedModel):
    """Links of a product list item."""

    self_: LinkSchema = Field(..., alias="self", description="Product detail view")
    cart: LinkSchema = Field(..., description="Add product to cart")


class ProductItemSchema(AliasedModel):
    """Product as it appears in collections."""

    id: int = Field(..., description="Product identifier")
    code: str = Field(..., description="Product code")
    name: str = Field(..., description="Product name")
    category: CategorySchema = Field(..., description="Primary category")
    price: PriceSchema
    thumbnail: str | None = Field(default=None, description="Thumbnail URL, null without a photo")
    links: ProductItemLinksSchema = Field(..., alias="_links")


class ProductCategoriesSchema(BaseModel):
    """Primary and additional categories."""

    main: CategorySchema
    other: list[CategorySchema] = Field(default_factory=list)


class ProductViewSchema(AliasedModel):
    """Full product representation."""

    id: int = Field(..., description="Product identifier")
    code: str = Field(..., description="Product code")
    name: str = Field(..., description="Product name")
    description: str | None = Field(default=None, description="Product description")
    categories: ProductCategoriesSchema
    tags: list[TagSchema] = Field(default_factory=list)
    price: PriceSchema
    links: SelfLinksSchema = Field(..., alias="_links")


# ============================================================================
# Collection Schemas
# ============================================================================


class CollectionLinksSchema(AliasedModel):
    """Navigation links of a paginated collection."""

    self_: LinkSchema = Field(..., alias="self")
    first: LinkSchema
    last: LinkSchema
    prev: LinkSchema | None = None
    next: LinkSchema | None = None


class CollectionMetaSchema(AliasedModel):
    """Pagination metadata."""

    total_count: int = Field(..., alias="totalCount", description="Total number of items")
    page_count: int = Field(..., alias="pageCount", description="Total number of pages")
    current_page: int = Field(..., alias="currentPage", description="Current page number")
    per_page: int = Field(..., alias="perPage", description="Items per page")


class ProductCollectionSchema(AliasedModel):
    """Paginated collection of products."""

    items: list[ProductItemSchema]
    links: CollectionLinksSchema = Field(..., alias="_links")
    meta: CollectionMetaSchema = Field(..., alias="_meta")
