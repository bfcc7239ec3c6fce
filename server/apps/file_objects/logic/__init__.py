"""Business logic layer for file objects app.

The lifecycle of a file object lives here:
- create, update and soft delete of metadata records
- routing of payloads to the blob store
- filtered, paginated reads

Collaborators (metadata store, blob store, translator) are injected
through the constructor of FileService, see ports.py for their shapes.
"""
