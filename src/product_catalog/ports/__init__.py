from .repository import IProductRepository

__all__ = ["IProductRepository"]
