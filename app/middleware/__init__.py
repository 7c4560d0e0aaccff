# app/middleware/__init__.py
from .logging import RequestLoggingMiddleware
