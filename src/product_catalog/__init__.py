"""Product catalog: validated products queried through specifications."""

from .bootstrap import CatalogRuntime, create_product_repository, create_runtime
from .config import Settings, StorageBackend, get_settings
from .domain import Product
from .ports import IProductRepository
from .specifications import Specification, catalog

__all__ = [
    "Product",
    "Specification",
    "catalog",
    "IProductRepository",
    # Startup
    "Settings",
    "StorageBackend",
    "get_settings",
    "CatalogRuntime",
    "create_runtime",
    "create_product_repository",
]
