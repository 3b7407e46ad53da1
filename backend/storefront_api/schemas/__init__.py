"""Schemas: Pydantic models validating path, query and body per operation."""
