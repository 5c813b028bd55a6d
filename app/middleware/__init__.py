"""HTTP middleware"""

from app.middleware.performance import PerformanceMiddleware

__all__ = ["PerformanceMiddleware"]
