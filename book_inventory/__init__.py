"""Book inventory REST API with JWT authentication and role-based access control."""

__version__ = "0.1.0"
