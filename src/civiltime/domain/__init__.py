"""Domain layer — civil dates, zones, conversions, and bucketing rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
Every function here is pure: no I/O, no ambient zone, no shared state.
"""
