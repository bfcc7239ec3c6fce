"""Exceptions for file objects app."""

import uuid


class InvalidPaginationError(ValueError):
    """Raised when a page request is outside the accepted bounds."""

    def __init__(self, page_size: int, page: int, max_page_size: int) -> None:
        """Initialize InvalidPaginationError.

        Args:
            page_size: Requested number of records per page.
            page: Requested zero-based page index.
            max_page_size: Largest page size the service accepts.
        """
        self.page_size = page_size
        self.page = page
        self.max_page_size = max_page_size

        super().__init__(
            f'Invalid pagination: page_size must be within '
            f'1..{max_page_size} and page must be non-negative '
            f'(got page_size={page_size}, page={page})',
        )


class FileDataNotFoundError(LookupError):
    """Raised when a record has no readable payload."""

    def __init__(self, file_id: uuid.UUID) -> None:
        """Initialize FileDataNotFoundError.

        Args:
            file_id: Id of the record without payload.
        """
        self.file_id = file_id
        super().__init__(f'No file data stored for file object {file_id}')


class BlobNotFoundError(LookupError):
    """Raised when a bucket holds no object under the requested key."""

    def __init__(self, bucket_name: str, key: str) -> None:
        """Initialize BlobNotFoundError.

        Args:
            bucket_name: Bucket that was read.
            key: Missing object key.
        """
        self.bucket_name = bucket_name
        self.key = key
        super().__init__(f'No object {key} in bucket {bucket_name}')
