"""Application pipeline – middleware chain around query dispatch."""
from mp_search.application.pipeline.middlewares import LoggingMiddleware
from mp_search.application.pipeline.pipeline import Handler, Middleware, Next, Pipeline

__all__ = ["Handler", "LoggingMiddleware", "Middleware", "Next", "Pipeline"]
