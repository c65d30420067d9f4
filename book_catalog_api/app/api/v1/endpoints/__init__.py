"""Domain routers for API v1."""
