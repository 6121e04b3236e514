"""Domain layer: the bounded integer value type and its codec rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
