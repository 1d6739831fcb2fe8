"""
API routes module.

FastAPI routers, dependencies and exception handlers for the HTTP surface.
"""
