"""
API routes module.

FastAPI application factory, dependencies and routers for all HTTP endpoints.
Build the application with ``orgsync.api.main.create_app``.
"""
