"""
Shared modules for the content catalog
"""
from .models import Content, ContentPayload, ContentQuery, ContentUpdate, HealthCheck, SortOrder
from .repositories import ContentRepository, InvalidPayloadError
from .config import config

__all__ = [
    "Content",
    "ContentPayload",
    "ContentQuery",
    "ContentUpdate",
    "HealthCheck",
    "SortOrder",
    "ContentRepository",
    "InvalidPayloadError",
    "config",
]
