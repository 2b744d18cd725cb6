"""Like use cases."""

from .like import LikeRequest, LikeResponse, LikeUseCase
from .unlike import UnlikeUseCase

__all__ = [
    "LikeRequest",
    "LikeResponse",
    "LikeUseCase",
    "UnlikeUseCase",
]
