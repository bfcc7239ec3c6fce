"""Settings for the file objects app."""

from server.settings.components import config

# Bucket receiving file payloads, keyed by FileObj id
FILE_OBJECTS_BUCKET_NAME = config(
    'MINIO_BUCKET_NAME',
    default='file-objects',
)
