from .routes import router, configure

__all__ = ["router", "configure"]
