"""
Web application package for the knight path service.

Provides the FastAPI REST API over knightpath.service. Run with
`knightpath-serve` or `uvicorn web.app:app`.
"""
