from .routes import router, summary_router

__all__ = ["router", "summary_router"]
