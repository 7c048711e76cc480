"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: records held by the repository
- Schemas: API contract (what client sends/receives)

Everything lives in internlink.schemas.schemas.
"""
