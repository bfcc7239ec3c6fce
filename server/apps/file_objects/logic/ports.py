"""Interfaces of the collaborators FileService depends on."""

import uuid
from typing import BinaryIO, Protocol

from server.apps.file_objects.logic.dto import FileFilter, FileObjDTO, RecordPage
from server.apps.file_objects.models import FileObj


class FileObjRepository(Protocol):
    """Metadata store of file objects."""

    def save(self, file_obj: FileObj) -> FileObj:
        """Insert or update a record, refreshing ``updated_at``."""

    def get_by_id(self, file_id: uuid.UUID) -> FileObj:
        """Fetch a record.

        Raises:
            FileObj.DoesNotExist: If no record has this id.
        """

    def find_by_id(self, file_id: uuid.UUID) -> FileObj | None:
        """Fetch a record, None if absent."""

    def filter(self, criteria: FileFilter) -> RecordPage[FileObj]:
        """Return one page of records matching every predicate."""


class BlobStore(Protocol):
    """Object store receiving file payloads."""

    def put_object_into_bucket(
        self,
        bucket_name: str,
        stream: BinaryIO,
        key: str,
    ) -> None:
        """Write (or overwrite) the object ``key`` in ``bucket_name``."""

    def get_object_from_bucket(self, bucket_name: str, key: str) -> bytes:
        """Read the whole object ``key`` from ``bucket_name``.

        Raises:
            BlobNotFoundError: If the bucket has no such object.
        """


class FileObjTranslator(Protocol):
    """Maps records to their caller-facing shape."""

    def to_dto(self, file_obj: FileObj) -> FileObjDTO:
        """Project a record, never exposing payload data."""
