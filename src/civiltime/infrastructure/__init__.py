"""Infrastructure layer — reading entry records from disk.

This layer depends on stdlib only. It must never import from services,
commands, or output. The service layer turns raw records into domain
models.
"""
