"""Lifecycle of file objects: metadata rows plus payloads in a bucket.

Ordering of side effects matters here. The metadata row is always
persisted before its payload is uploaded, because the blob key is the
record id. The two writes are not transactional: if the upload fails
the committed row stays without a blob (or, on update, with the
previous blob) and the error propagates to the caller. No compensation
and no retry is attempted. Reading such a record reports missing data.
"""

import logging
import uuid
from typing import BinaryIO, Final, final

from django.conf import settings
from django.core.files.storage import default_storage

from server.apps.file_objects.exceptions import (
    BlobNotFoundError,
    FileDataNotFoundError,
)
from server.apps.file_objects.infrastructure.metadata import (
    calculate_checksum,
    get_stream_size,
    has_payload,
    normalize_extension,
    to_stream,
)
from server.apps.file_objects.infrastructure.repository import (
    DjangoFileObjRepository,
)
from server.apps.file_objects.logic.dto import (
    FileFilter,
    FileObjDTO,
    FileResponse,
    FileServiceConfig,
)
from server.apps.file_objects.logic.mapper import FileObjMapper
from server.apps.file_objects.logic.ports import (
    BlobStore,
    FileObjRepository,
    FileObjTranslator,
)
from server.apps.file_objects.models import FileObj

ALREADY_DELETED_MESSAGE: Final = 'File is already marked for deletion'

logger = logging.getLogger(__name__)


@final
class FileService:
    """Create, update, filter and soft delete file objects.

    Collaborators are passed in explicitly, see ``build_file_service``
    for the production wiring.
    """

    def __init__(
        self,
        repository: FileObjRepository,
        blob_store: BlobStore,
        translator: FileObjTranslator,
        config: FileServiceConfig,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Metadata store of file objects.
            blob_store: Object store receiving payloads.
            translator: Record to DTO mapper.
            config: Service configuration (bucket name).
        """
        self._repository = repository
        self._blob_store = blob_store
        self._translator = translator
        self._config = config

    def create(self, request: FileObjDTO) -> FileResponse:
        """Create a record and upload its payload if one is given.

        Args:
            request: Descriptive fields and optional ``file_data``.

        Returns:
            Successful response with the translated record.

        Raises:
            Exception: If the payload upload fails (row stays committed).
        """
        stream = _open_payload(request.file_data)

        file_obj = FileObj(
            file_name=request.file_name or '',
            ext=normalize_extension(request.ext or ''),
            owner_id=request.owner_id,
            folder_id=request.folder_id,
        )
        if stream is not None:
            _apply_payload_metadata(file_obj, stream)

        file_obj = self._repository.save(file_obj)
        logger.info('File object created: %s', file_obj.id)

        if stream is not None:
            self._upload_payload(file_obj, stream)

        return FileResponse(
            success=True,
            file_obj_pages=[self._translator.to_dto(file_obj)],
        )

    def update(self, file_id: uuid.UUID, request: FileObjDTO) -> FileResponse:
        """Update descriptive fields and optionally replace the payload.

        Only ``file_name`` and ``ext`` are taken from the request, and
        only when they are not None. The blob store is touched only if
        the request carries non-empty ``file_data``.

        Args:
            file_id: Id of an existing record.
            request: Fields to change and optional ``file_data``.

        Returns:
            Successful response with the translated record.

        Raises:
            FileObj.DoesNotExist: If the record does not exist or is
                marked for deletion.
            Exception: If the payload upload fails (row stays committed).
        """
        file_obj = self._repository.get_by_id(file_id)
        if file_obj.is_deleted:
            raise FileObj.DoesNotExist(
                f'File object {file_id} is marked for deletion',
            )

        if request.file_name is not None:
            file_obj.file_name = request.file_name
        if request.ext is not None:
            file_obj.ext = normalize_extension(request.ext)

        stream = _open_payload(request.file_data)
        if stream is not None:
            _apply_payload_metadata(file_obj, stream)

        file_obj = self._repository.save(file_obj)
        logger.info('File object updated: %s', file_obj.id)

        if stream is not None:
            self._upload_payload(file_obj, stream)

        return FileResponse(
            success=True,
            file_obj_pages=[self._translator.to_dto(file_obj)],
        )

    def filter(self, criteria: FileFilter) -> FileResponse:
        """Return one page of records matching the criteria.

        Args:
            criteria: Filter predicates and page request.

        Returns:
            Successful response with translated records in store order,
            an empty list when nothing matches.
        """
        page = self._repository.filter(criteria)
        logger.debug(
            'Filter matched %d file objects, returning %d',
            page.total_count,
            len(page),
        )
        return FileResponse(
            success=True,
            file_obj_pages=[
                self._translator.to_dto(file_obj) for file_obj in page
            ],
        )

    def set_deleted_status(self, file_id: uuid.UUID) -> FileResponse:
        """Soft delete a record.

        Repeated calls are safe: a record already marked as deleted is
        not written again and the response carries a notice instead of
        an empty message.

        Args:
            file_id: Id of an existing record.

        Returns:
            Successful response without records.

        Raises:
            FileObj.DoesNotExist: If the record does not exist.
        """
        file_obj = self._repository.find_by_id(file_id)
        if file_obj is None:
            raise FileObj.DoesNotExist(f'File object {file_id} does not exist')

        if file_obj.is_deleted:
            logger.info('File object already marked for deletion: %s', file_id)
            return FileResponse(success=True, message=ALREADY_DELETED_MESSAGE)

        file_obj.is_deleted = True
        self._repository.save(file_obj)
        logger.info('File object marked for deletion: %s', file_id)

        return FileResponse(success=True)

    def read_file_data(self, file_id: uuid.UUID) -> bytes:
        """Download the payload of a live record.

        Args:
            file_id: Id of an existing record.

        Returns:
            Payload bytes.

        Raises:
            FileObj.DoesNotExist: If the record does not exist.
            FileDataNotFoundError: If the record is soft deleted, never
                received a payload, or its upload failed.
        """
        file_obj = self._repository.get_by_id(file_id)
        if file_obj.is_deleted or not file_obj.has_data():
            raise FileDataNotFoundError(file_id)

        try:
            return self._blob_store.get_object_from_bucket(
                self._config.bucket_name,
                file_obj.get_blob_key(),
            )
        except BlobNotFoundError as error:
            logger.warning('File object has metadata but no blob: %s', file_id)
            raise FileDataNotFoundError(file_id) from error

    def _upload_payload(self, file_obj: FileObj, stream: BinaryIO) -> None:
        key = file_obj.get_blob_key()
        try:
            self._blob_store.put_object_into_bucket(
                self._config.bucket_name,
                stream,
                key,
            )
        except Exception:
            logger.exception(
                'Payload upload failed, record saved without new blob: %s',
                key,
            )
            raise


def _open_payload(file_data: str | bytes | None) -> BinaryIO | None:
    if not has_payload(file_data):
        return None
    return to_stream(file_data)  # type: ignore[arg-type]


def _apply_payload_metadata(file_obj: FileObj, stream: BinaryIO) -> None:
    file_obj.size_bytes = get_stream_size(stream)
    file_obj.checksum_sha256 = calculate_checksum(stream)


def build_file_service() -> FileService:
    """Wire FileService with the production collaborators.

    Returns:
        Service using the Django ORM, the default storage backend and
        the bucket from ``FILE_OBJECTS_BUCKET_NAME``.
    """
    return FileService(
        repository=DjangoFileObjRepository(),
        blob_store=default_storage,  # type: ignore[arg-type]
        translator=FileObjMapper(),
        config=FileServiceConfig(
            bucket_name=settings.FILE_OBJECTS_BUCKET_NAME,
        ),
    )
