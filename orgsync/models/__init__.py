"""
API request/response schemas.

Pydantic models forming the validation layer in front of the services.
"""
