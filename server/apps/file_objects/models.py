"""Database models for file objects app."""

import uuid
from typing import Final, final, override

from django.conf import settings
from django.db import models

# Constants for field max lengths
_FILE_NAME_MAX_LENGTH: Final = 255
_EXT_MAX_LENGTH: Final = 32
_CHECKSUM_MAX_LENGTH: Final = 64  # SHA256 hex length
_FOLDER_NAME_MAX_LENGTH: Final = 255


@final
class Folder(models.Model):
    """Folder grouping file objects of one owner."""

    name = models.CharField(
        max_length=_FOLDER_NAME_MAX_LENGTH,
    )

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='folders',
        null=True,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Folder'  # type: ignore[mutable-override]
        verbose_name_plural = 'Folders'  # type: ignore[mutable-override]
        ordering = ['name']

    @override
    def __str__(self) -> str:
        """String representation."""
        return self.name


@final
class FileObj(models.Model):
    """Metadata record of a file whose payload lives in object storage.

    The payload itself is never stored in the row. It is written to the
    configured bucket under ``str(id)``, so the id doubles as the blob key.
    ``checksum_sha256`` is empty until the record receives a payload.

    Soft-deleted records keep their row and their blob, they only stop
    showing up in the default filter.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )

    file_name = models.CharField(
        max_length=_FILE_NAME_MAX_LENGTH,
        blank=True,
        default='',
    )

    ext = models.CharField(
        max_length=_EXT_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Extension without leading dot',
    )

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name='file_objects',
        null=True,
        blank=True,
    )

    folder = models.ForeignKey(
        Folder,
        on_delete=models.SET_NULL,
        related_name='file_objects',
        null=True,
        blank=True,
    )

    is_deleted = models.BooleanField(default=False, db_index=True)

    # Metadata of the last payload written to the bucket
    size_bytes = models.BigIntegerField(default=0)

    checksum_sha256 = models.CharField(
        max_length=_CHECKSUM_MAX_LENGTH,
        blank=True,
        default='',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'File object'  # type: ignore[mutable-override]
        verbose_name_plural = 'File objects'  # type: ignore[mutable-override]
        ordering = ['-updated_at', 'id']

        indexes = [
            models.Index(
                fields=['is_deleted', '-updated_at'],
                name='fileobj_deleted_recent_idx',
            ),
            models.Index(
                fields=['owner', 'is_deleted'],
                name='fileobj_owner_deleted_idx',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.id}:{self.get_full_name()}'

    def get_full_name(self) -> str:
        """Join file name and extension.

        Example: ('report', 'pdf') -> 'report.pdf'

        Returns:
            File name with extension, or the bare name without one.
        """
        if self.ext:
            return f'{self.file_name}.{self.ext}'
        return self.file_name

    def get_blob_key(self) -> str:
        """Key of the payload in the bucket.

        Returns:
            Canonical string form of the record id.
        """
        return str(self.id)

    def has_data(self) -> bool:
        """Check whether a payload was ever written for this record.

        Returns:
            True if the record received non-empty file data.
        """
        return bool(self.checksum_sha256)
