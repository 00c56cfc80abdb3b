"""Domain layer — rules, errors, and the field validator.

This layer depends only on stdlib and pydantic.
It must never import from services or config, and it never logs.
"""
