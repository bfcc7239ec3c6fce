"""Django storage configuration for the S3-compatible blob store.

File payloads go to MinIO in development and to any S3-compatible
service in production. Both use the same BlobStorage backend.
"""

from typing import Any, Final

from server.settings.components import config

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': (
            'server.apps.file_objects.infrastructure.storage.BlobStorage'
        ),
        'OPTIONS': {
            'bucket_name': config('MINIO_BUCKET_NAME', default='file-objects'),
            'access_key': config('AWS_ACCESS_KEY_ID', default='minioadmin'),
            'secret_key': config(
                'AWS_SECRET_ACCESS_KEY',
                default='minioadmin',
            ),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='us-east-1',
            ),
            # Payload keys are record ids, rewrites must replace the blob
            'file_overwrite': True,
            'default_acl': None,
        },
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
