from .dto import (
    CreateProductRequest,
    PagedResponse,
    PaginationRequest,
    ProductResponse,
)
from .use_cases import (
    CreateProductUseCase,
    GetAllProductsUseCase,
    SearchProductsUseCase,
)

__all__ = [
    "CreateProductRequest",
    "PaginationRequest",
    "ProductResponse",
    "PagedResponse",
    "CreateProductUseCase",
    "GetAllProductsUseCase",
    "SearchProductsUseCase",
]
