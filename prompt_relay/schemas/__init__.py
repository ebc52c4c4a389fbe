"""Schemas: Pydantic models for inbound request bodies."""
