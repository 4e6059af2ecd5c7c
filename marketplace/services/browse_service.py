"""
BrowseService - Public seller directory

Lists sellers that have at least one active product, with a preview of their
newest listings.
"""

from typing import Any, Dict, Optional

from django.contrib.auth import get_user_model
from django.db.models import Count, Prefetch, Q

from authentication.models import UserAddress
from marketplace.models import Product, ProductStatus

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 50
TOP_PRODUCTS = 3


class BrowseService(BaseService):
    """
    Service for the public seller directory.

    Sellers are ranked by their number of active products, newest accounts
    first on ties. Search matches name, bio or location case-insensitively.
    """

    @BaseService.log_performance
    def list_sellers(
        self, search: Optional[str] = None, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ServiceResult[Dict[str, Any]]:
        """
        Page through sellers.

        Args:
            search: Optional free-text filter
            page: Page number (1-indexed)
            limit: Page size, capped at 50

        Returns:
            ServiceResult with ``{"data": [...], "meta": {"total", "page", "limit"}}``
        """
        if limit <= 0:
            return service_err(ErrorCodes.VALIDATION_ERROR, "limit must be greater than zero")
        if page <= 0:
            return service_err(ErrorCodes.VALIDATION_ERROR, "page must be greater than zero")
        limit = min(limit, MAX_PAGE_SIZE)

        sellers = User.objects.annotate(
            active_product_count=Count("products", filter=Q(products__status=ProductStatus.ACTIVE))
        ).filter(active_product_count__gte=1)

        term = (search or "").strip()
        if term:
            sellers = sellers.filter(Q(name__icontains=term) | Q(bio__icontains=term) | Q(location__icontains=term))

        total = sellers.count()
        offset = (page - 1) * limit

        self.logger.info(f"Fetching browse sellers: search={term!r} page={page} limit={limit}")

        page_sellers = sellers.order_by("-active_product_count", "-created_at").prefetch_related(
            Prefetch(
                "products",
                queryset=Product.objects.filter(status=ProductStatus.ACTIVE).order_by("-created_at"),
                to_attr="active_products",
            ),
            Prefetch(
                "addresses",
                queryset=UserAddress.objects.filter(is_default=True).order_by("-updated_at"),
                to_attr="default_addresses",
            ),
        )[offset : offset + limit]

        return service_ok(
            {
                "data": [self._seller_entry(seller) for seller in page_sellers],
                "meta": {"total": total, "page": page, "limit": limit},
            }
        )

    def _seller_entry(self, seller) -> Dict[str, Any]:
        address = seller.default_addresses[0] if seller.default_addresses else None
        return {
            "seller_id": seller.id,
            "seller_name": seller.name,
            "business_name": seller.bio if seller.bio is not None else seller.name,
            "profile_url": seller.profile_url,
            "location": seller.location if seller.location is not None else (address.city if address else None),
            "pincode": address.pincode if address else None,
            "top_products": [
                {
                    "id": product.id,
                    "name": product.name,
                    "price": product.price,
                    "categories": product.categories,
                    "status": product.status,
                    "image_url": product.primary_image,
                }
                for product in seller.active_products[:TOP_PRODUCTS]
            ],
            "product_count": seller.active_product_count,
        }
