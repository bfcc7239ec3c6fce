"""Custom storage backend for S3-compatible blob storage."""

import logging
from typing import BinaryIO, Final, final

from botocore.exceptions import ClientError
from storages.backends.s3 import S3Storage

from server.apps.file_objects.exceptions import BlobNotFoundError

_MISSING_OBJECT_CODES: Final = frozenset(('NoSuchKey', '404'))

logger = logging.getLogger(__name__)


@final
class BlobStorage(S3Storage):
    """S3 storage backend holding file object payloads.

    Extends django-storages S3Storage with bucket-addressed put/get, so
    callers choose the bucket explicitly instead of relying on the
    backend's configured one. Errors are logged and re-raised, there
    is no retry.
    """

    def put_object_into_bucket(
        self,
        bucket_name: str,
        stream: BinaryIO,
        key: str,
    ) -> None:
        """Upload a payload, replacing any object with the same key.

        Args:
            bucket_name: Target bucket.
            stream: Binary stream with the payload.
            key: Object key (record id).

        Raises:
            Exception: If the S3 upload fails.
        """
        try:
            logger.info('Uploading object to bucket %s: %s', bucket_name, key)
            self.connection.Bucket(bucket_name).upload_fileobj(stream, key)
            logger.info('Successfully uploaded object: %s', key)
        except Exception:
            logger.exception(
                'Failed to upload object to bucket %s: %s',
                bucket_name,
                key,
            )
            raise

    def get_object_from_bucket(self, bucket_name: str, key: str) -> bytes:
        """Download a whole payload.

        Args:
            bucket_name: Source bucket.
            key: Object key (record id).

        Returns:
            Object content.

        Raises:
            BlobNotFoundError: If the bucket has no object under the key.
            Exception: If the S3 read fails.
        """
        try:
            logger.debug('Reading object from bucket %s: %s', bucket_name, key)
            response = self.connection.Object(bucket_name, key).get()
        except Exception as error:
            if _is_missing_object(error):
                logger.warning(
                    'Object not found in bucket %s: %s',
                    bucket_name,
                    key,
                )
                raise BlobNotFoundError(bucket_name, key) from error
            logger.exception(
                'Failed to read object from bucket %s: %s',
                bucket_name,
                key,
            )
            raise
        return response['Body'].read()


def _is_missing_object(error: Exception) -> bool:
    return (
        isinstance(error, ClientError)
        and error.response.get('Error', {}).get('Code') in _MISSING_OBJECT_CODES
    )
