"""Django ORM implementation of the file object metadata store."""

import logging
import uuid
from typing import final

from django.db.models import Q, QuerySet

from server.apps.file_objects.logic.dto import FileFilter, RecordPage
from server.apps.file_objects.models import FileObj

logger = logging.getLogger(__name__)


def build_filter_query(criteria: FileFilter) -> Q:
    """Translate filter predicates into a single Q expression.

    Args:
        criteria: Named filter predicates.

    Returns:
        Q matching every enabled predicate.
    """
    query = Q(is_deleted=criteria.is_deleted)

    if criteria.has_data is not None:
        without_data = Q(checksum_sha256='')
        query &= ~without_data if criteria.has_data else without_data
    if criteria.in_root is not None:
        query &= Q(folder__isnull=criteria.in_root)
    if criteria.name:
        query &= Q(file_name__icontains=criteria.name)
    if criteria.ext:
        query &= Q(ext__iexact=criteria.ext.lstrip('.'))
    if criteria.owner_id is not None:
        query &= Q(owner_id=criteria.owner_id)
    if criteria.folder_id is not None:
        query &= Q(folder_id=criteria.folder_id)
    if criteria.updated_from is not None:
        query &= Q(updated_at__gte=criteria.updated_from)
    if criteria.updated_to is not None:
        query &= Q(updated_at__lte=criteria.updated_to)

    return query


@final
class DjangoFileObjRepository:
    """Metadata store backed by the FileObj table."""

    def save(self, file_obj: FileObj) -> FileObj:
        """Insert or update a record.

        ``updated_at`` is refreshed by the model's auto_now field.

        Args:
            file_obj: Record to persist.

        Returns:
            The persisted record.
        """
        file_obj.save()
        logger.debug('File object saved: %s', file_obj.id)
        return file_obj

    def get_by_id(self, file_id: uuid.UUID) -> FileObj:
        """Fetch a record by id.

        Args:
            file_id: Record id.

        Returns:
            FileObj instance.

        Raises:
            FileObj.DoesNotExist: If record not found.
        """
        return FileObj.objects.get(id=file_id)

    def find_by_id(self, file_id: uuid.UUID) -> FileObj | None:
        """Fetch a record by id if present.

        Args:
            file_id: Record id.

        Returns:
            FileObj instance or None.
        """
        return FileObj.objects.filter(id=file_id).first()

    def filter(self, criteria: FileFilter) -> RecordPage[FileObj]:
        """Return one page of matching records, newest update first.

        Args:
            criteria: Filter predicates and page request.

        Returns:
            Page of records with the total match count.
        """
        queryset: QuerySet[FileObj] = FileObj.objects.filter(
            build_filter_query(criteria),
        ).order_by('-updated_at', 'id')

        paginating = criteria.paginating
        items = list(
            queryset[paginating.offset:paginating.offset + paginating.page_size],
        )

        return RecordPage(
            items=items,
            page=paginating.page,
            page_size=paginating.page_size,
            total_count=queryset.count(),
        )
