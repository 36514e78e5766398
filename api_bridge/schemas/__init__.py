"""Schemas - pydantic models for records read from and written to the service."""
