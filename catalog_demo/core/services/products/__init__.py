from .product_service import ProductService, sample_products
from .seed import generate_products

__all__ = ["ProductService", "generate_products", "sample_products"]
