"""
Products resource for the Dodo Payments SDK.

Sub-resources:

- ``client.products.images.update(product_id)`` returns a presigned upload URL
- ``client.products.short_links.create(product_id, slug=...)`` and ``list()``
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.enums import TaxCategory
from ..models.products import (
    DigitalProductDeliveryParams,
    DigitalProductDeliveryUpdate,
    ImageUpdateResponse,
    LicenseKeyDuration,
    Price,
    Product,
    ProductCreateParams,
    ProductListItem,
    ProductListParams,
    ProductUpdateFilesParams,
    ProductUpdateFilesResponse,
    ProductUpdateParams,
    ShortLinkCreateParams,
    ShortLinkCreateResponse,
    ShortLinkListItem,
    ShortLinkListParams,
)
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path

if TYPE_CHECKING:
    from ..client import AsyncDodoPayments, DodoPayments


def _image_query(force_update: NotGivenOr[bool]) -> Dict[str, bool]:
    return {} if force_update is NOT_GIVEN else {"force_update": force_update}


class AsyncImagesResource(AsyncBaseResource):
    async def update(
        self,
        id: str,
        *,
        force_update: NotGivenOr[bool] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> ImageUpdateResponse:
        """Get an upload URL for the product image.

        Upload the image with ``PUT <url>``; ``force_update`` replaces an
        existing image.
        """
        return await self._put(
            f"products/{quote_path(id)}/images",
            query=_image_query(force_update),
            cast_to=ImageUpdateResponse,
            options=options,
        )


class AsyncShortLinksResource(AsyncBaseResource):
    async def create(
        self,
        id: str,
        *,
        slug: str,
        static_checkout_params: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> ShortLinkCreateResponse:
        """Create a short checkout link for a product."""
        params = build_params(ShortLinkCreateParams, slug=slug, static_checkout_params=static_checkout_params)
        return await self._post(
            f"products/{quote_path(id)}/short_links",
            body=params.to_wire(),
            cast_to=ShortLinkCreateResponse,
            options=options,
        )

    async def list(
        self,
        *,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        product_id: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[ShortLinkListItem]:
        params = build_params(
            ShortLinkListParams, page_number=page_number, page_size=page_size, product_id=product_id
        )
        return await self._get_page(
            "products/short_links",
            AsyncDefaultPageNumberPagination,
            ShortLinkListItem,
            query=params.to_wire(),
            options=options,
        )


class AsyncProductsResource(AsyncBaseResource):
    """Async resource for product operations.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            product = await client.products.create(
                name="Pro plan",
                tax_category="saas",
                price={
                    "type": "recurring_price",
                    "currency": "USD",
                    "price": 1200,
                    "discount": 0,
                    "purchasing_power_parity": False,
                    "payment_frequency_count": 1,
                    "payment_frequency_interval": "Month",
                    "subscription_period_count": 1,
                    "subscription_period_interval": "Year",
                },
            )
        ```
    """

    def __init__(self, client: "AsyncDodoPayments") -> None:
        super().__init__(client)
        self.images = AsyncImagesResource(client)
        self.short_links = AsyncShortLinksResource(client)

    async def create(
        self,
        *,
        name: str,
        price: Price,
        tax_category: TaxCategory,
        addons: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        brand_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        digital_product_delivery: NotGivenOr[Optional[DigitalProductDeliveryParams]] = NOT_GIVEN,
        license_key_activation_message: NotGivenOr[Optional[str]] = NOT_GIVEN,
        license_key_activations_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        license_key_duration: NotGivenOr[Optional[LicenseKeyDuration]] = NOT_GIVEN,
        license_key_enabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Dict[str, str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Product:
        """Create a product.

        Args:
            name: Product name
            price: A one-time, recurring or usage-based price
            tax_category: Tax category of the product
            license_key_enabled: Issue a license key with every purchase
            options: Per-call request options
        """
        params = build_params(
            ProductCreateParams,
            name=name,
            price=price,
            tax_category=tax_category,
            addons=addons,
            brand_id=brand_id,
            description=description,
            digital_product_delivery=digital_product_delivery,
            license_key_activation_message=license_key_activation_message,
            license_key_activations_limit=license_key_activations_limit,
            license_key_duration=license_key_duration,
            license_key_enabled=license_key_enabled,
            metadata=metadata,
        )
        return await self._post("products", body=params.to_wire(), cast_to=Product, options=options)

    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Product:
        """Get a product by ID."""
        return await self._get(f"products/{quote_path(id)}", cast_to=Product, options=options)

    async def update(
        self,
        id: str,
        *,
        addons: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        brand_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        digital_product_delivery: NotGivenOr[Optional[DigitalProductDeliveryUpdate]] = NOT_GIVEN,
        image_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        license_key_activation_message: NotGivenOr[Optional[str]] = NOT_GIVEN,
        license_key_activations_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        license_key_duration: NotGivenOr[Optional[LicenseKeyDuration]] = NOT_GIVEN,
        license_key_enabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        price: NotGivenOr[Optional[Price]] = NOT_GIVEN,
        tax_category: NotGivenOr[Optional[TaxCategory]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Update a product. Only the arguments passed are changed."""
        params = build_params(
            ProductUpdateParams,
            addons=addons,
            brand_id=brand_id,
            description=description,
            digital_product_delivery=digital_product_delivery,
            image_id=image_id,
            license_key_activation_message=license_key_activation_message,
            license_key_activations_limit=license_key_activations_limit,
            license_key_duration=license_key_duration,
            license_key_enabled=license_key_enabled,
            metadata=metadata,
            name=name,
            price=price,
            tax_category=tax_category,
        )
        await self._patch(f"products/{quote_path(id)}", body=params.to_wire(), options=options)

    async def list(
        self,
        *,
        archived: NotGivenOr[bool] = NOT_GIVEN,
        brand_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        recurring: NotGivenOr[bool] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[ProductListItem]:
        """List products.

        Args:
            archived: List archived products instead of active ones
            recurring: Only subscription products (``True``) or one-time products (``False``)
        """
        params = build_params(
            ProductListParams,
            archived=archived,
            brand_id=brand_id,
            page_number=page_number,
            page_size=page_size,
            recurring=recurring,
        )
        return await self._get_page(
            "products", AsyncDefaultPageNumberPagination, ProductListItem, query=params.to_wire(), options=options
        )

    async def archive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        """Archive a product so it can no longer be sold."""
        await self._delete(f"products/{quote_path(id)}", options=options)

    async def unarchive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        await self._post(f"products/{quote_path(id)}/unarchive", options=options)

    async def update_files(
        self, id: str, *, file_name: str, options: Optional[RequestOptions] = None
    ) -> ProductUpdateFilesResponse:
        """Register a digital delivery file and get the URL to upload it to."""
        params = build_params(ProductUpdateFilesParams, file_name=file_name)
        return await self._put(
            f"products/{quote_path(id)}/files",
            body=params.to_wire(),
            cast_to=ProductUpdateFilesResponse,
            options=options,
        )


class ImagesResource(SyncBaseResource):
    def update(
        self,
        id: str,
        *,
        force_update: NotGivenOr[bool] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> ImageUpdateResponse:
        """Get an upload URL for the product image."""
        return self._put(
            f"products/{quote_path(id)}/images",
            query=_image_query(force_update),
            cast_to=ImageUpdateResponse,
            options=options,
        )


class ShortLinksResource(SyncBaseResource):
    def create(
        self,
        id: str,
        *,
        slug: str,
        static_checkout_params: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> ShortLinkCreateResponse:
        """Create a short checkout link for a product."""
        params = build_params(ShortLinkCreateParams, slug=slug, static_checkout_params=static_checkout_params)
        return self._post(
            f"products/{quote_path(id)}/short_links",
            body=params.to_wire(),
            cast_to=ShortLinkCreateResponse,
            options=options,
        )

    def list(
        self,
        *,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        product_id: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[ShortLinkListItem]:
        params = build_params(
            ShortLinkListParams, page_number=page_number, page_size=page_size, product_id=product_id
        )
        return self._get_page(
            "products/short_links",
            SyncDefaultPageNumberPagination,
            ShortLinkListItem,
            query=params.to_wire(),
            options=options,
        )


class ProductsResource(SyncBaseResource):
    """Sync resource for product operations.

    Example:
        ```python
        with DodoPayments(api_key="...") as client:
            upload = client.products.update_files("pdt_123", file_name="guide.pdf")
            httpx.put(upload.url, content=open("guide.pdf", "rb").read())
        ```
    """

    def __init__(self, client: "DodoPayments") -> None:
        super().__init__(client)
        self.images = ImagesResource(client)
        self.short_links = ShortLinksResource(client)

    def create(
        self,
        *,
        name: str,
        price: Price,
        tax_category: TaxCategory,
        addons: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        brand_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        digital_product_delivery: NotGivenOr[Optional[DigitalProductDeliveryParams]] = NOT_GIVEN,
        license_key_activation_message: NotGivenOr[Optional[str]] = NOT_GIVEN,
        license_key_activations_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        license_key_duration: NotGivenOr[Optional[LicenseKeyDuration]] = NOT_GIVEN,
        license_key_enabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Dict[str, str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Product:
        """Create a product."""
        params = build_params(
            ProductCreateParams,
            name=name,
            price=price,
            tax_category=tax_category,
            addons=addons,
            brand_id=brand_id,
            description=description,
            digital_product_delivery=digital_product_delivery,
            license_key_activation_message=license_key_activation_message,
            license_key_activations_limit=license_key_activations_limit,
            license_key_duration=license_key_duration,
            license_key_enabled=license_key_enabled,
            metadata=metadata,
        )
        return self._post("products", body=params.to_wire(), cast_to=Product, options=options)

    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Product:
        """Get a product by ID."""
        return self._get(f"products/{quote_path(id)}", cast_to=Product, options=options)

    def update(
        self,
        id: str,
        *,
        addons: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        brand_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        digital_product_delivery: NotGivenOr[Optional[DigitalProductDeliveryUpdate]] = NOT_GIVEN,
        image_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        license_key_activation_message: NotGivenOr[Optional[str]] = NOT_GIVEN,
        license_key_activations_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        license_key_duration: NotGivenOr[Optional[LicenseKeyDuration]] = NOT_GIVEN,
        license_key_enabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        price: NotGivenOr[Optional[Price]] = NOT_GIVEN,
        tax_category: NotGivenOr[Optional[TaxCategory]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Update a product. Only the arguments passed are changed."""
        params = build_params(
            ProductUpdateParams,
            addons=addons,
            brand_id=brand_id,
            description=description,
            digital_product_delivery=digital_product_delivery,
            image_id=image_id,
            license_key_activation_message=license_key_activation_message,
            license_key_activations_limit=license_key_activations_limit,
            license_key_duration=license_key_duration,
            license_key_enabled=license_key_enabled,
            metadata=metadata,
            name=name,
            price=price,
            tax_category=tax_category,
        )
        self._patch(f"products/{quote_path(id)}", body=params.to_wire(), options=options)

    def list(
        self,
        *,
        archived: NotGivenOr[bool] = NOT_GIVEN,
        brand_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        recurring: NotGivenOr[bool] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[ProductListItem]:
        """List products."""
        params = build_params(
            ProductListParams,
            archived=archived,
            brand_id=brand_id,
            page_number=page_number,
            page_size=page_size,
            recurring=recurring,
        )
        return self._get_page(
            "products", SyncDefaultPageNumberPagination, ProductListItem, query=params.to_wire(), options=options
        )

    def archive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        """Archive a product so it can no longer be sold."""
        self._delete(f"products/{quote_path(id)}", options=options)

    def unarchive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        self._post(f"products/{quote_path(id)}/unarchive", options=options)

    def update_files(
        self, id: str, *, file_name: str, options: Optional[RequestOptions] = None
    ) -> ProductUpdateFilesResponse:
        """Register a digital delivery file and get the URL to upload it to."""
        params = build_params(ProductUpdateFilesParams, file_name=file_name)
        return self._put(
            f"products/{quote_path(id)}/files",
            body=params.to_wire(),
            cast_to=ProductUpdateFilesResponse,
            options=options,
        )


__all__ = [
    "AsyncImagesResource",
    "AsyncProductsResource",
    "AsyncShortLinksResource",
    "ImagesResource",
    "ProductsResource",
    "ShortLinksResource",
]
