# Security helpers package init
from content_api.security.sanitize import (
    CONTENT,
    RESTRICTIVE,
    SanitizationPolicy,
    sanitize,
    sanitize_content,
    sanitize_restrictive,
    strip_tags,
)

__all__ = [
    "CONTENT",
    "RESTRICTIVE",
    "SanitizationPolicy",
    "sanitize",
    "sanitize_content",
    "sanitize_restrictive",
    "strip_tags",
]
