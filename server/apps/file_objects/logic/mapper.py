"""Translation of file object records into DTOs."""

from typing import final

from server.apps.file_objects.logic.dto import FileObjDTO
from server.apps.file_objects.models import FileObj


@final
class FileObjMapper:
    """Field-by-field projection of FileObj onto FileObjDTO."""

    def to_dto(self, file_obj: FileObj) -> FileObjDTO:
        """Translate a record for the caller.

        Args:
            file_obj: Record to translate.

        Returns:
            DTO with ``file_data`` left as None.
        """
        return FileObjDTO(
            id=file_obj.id,
            file_name=file_obj.file_name,
            ext=file_obj.ext,
            owner_id=file_obj.owner_id,
            folder_id=file_obj.folder_id,
            is_deleted=file_obj.is_deleted,
            size_bytes=file_obj.size_bytes,
            created_at=file_obj.created_at,
            updated_at=file_obj.updated_at,
            file_data=None,
        )
