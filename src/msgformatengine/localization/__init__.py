"""Localization layer: template catalog and the message engine.

Python 3.13+.
"""

from .catalog import CatalogEntry, CatalogSource, FallbackInfo, ResourceCatalog
from .orchestrator import MessageEngine
from .types import BundleName, MessageKey, TemplateText

__all__ = [
    "BundleName",
    "CatalogEntry",
    "CatalogSource",
    "FallbackInfo",
    "MessageEngine",
    "MessageKey",
    "ResourceCatalog",
    "TemplateText",
]
