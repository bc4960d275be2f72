from .repository import InMemoryProductRepository

__all__ = ["InMemoryProductRepository"]
