"""Infrastructure layer for file objects app.

This package contains integrations with external systems:
- Django ORM metadata store
- S3-compatible blob store (MinIO)
- Payload helpers (stream conversion, checksum)

Keep infrastructure concerns separate from business logic.
"""
