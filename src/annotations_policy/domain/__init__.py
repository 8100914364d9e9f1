"""Domain layer — criteria, naming rules, and settings models.

This layer depends only on stdlib and pydantic.
It must never import from services, output, or config.
"""
