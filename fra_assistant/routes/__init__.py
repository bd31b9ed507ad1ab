"""
API routes for the FRA DSS Assistant
"""

from .chat import router as chat_router
from .schemes import router as schemes_router
from .villages import router as villages_router

__all__ = [
    "chat_router",
    "schemes_router",
    "villages_router"
]
