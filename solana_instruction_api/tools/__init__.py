"""Developer tools (OpenAPI export)."""
