"""FastAPI routers."""

from docx_placeholders.api.placeholders import router as placeholders_router

__all__ = [
    "placeholders_router",
]
