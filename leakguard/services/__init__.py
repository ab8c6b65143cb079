"""Search handlers and the error renderer for the leakguard demo."""

from leakguard.services.catalog import lookup
from leakguard.services.renderer import RenderedError, render
from leakguard.services.search import handle_secure_search
from leakguard.services.vulnerable import handle_vulnerable_search

__all__ = [
    "RenderedError",
    "handle_secure_search",
    "handle_vulnerable_search",
    "lookup",
    "render",
]
