"""API request/response schemas (pydantic). JSON field names are camelCase."""
