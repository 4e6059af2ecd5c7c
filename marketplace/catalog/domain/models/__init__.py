from .catalog import Product, ProductCategory, ProductStatus, ProductUnit


__all__ = [
    "Product",
    "ProductCategory",
    "ProductStatus",
    "ProductUnit",
]
