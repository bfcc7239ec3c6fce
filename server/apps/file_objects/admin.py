"""Django admin configuration for file objects app."""

from django.contrib import admin, messages
from django.db.models import Count, Q, QuerySet
from django.http import HttpRequest

from server.apps.file_objects.logic.file_service import build_file_service
from server.apps.file_objects.models import FileObj, Folder

_KIB = 1024


def format_size(size_bytes: int) -> str:
    """Format a byte count for display.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Human-readable size (e.g., '1.5 MB', '234 B').
    """
    if size_bytes < _KIB:
        return f'{size_bytes} B'
    if size_bytes < _KIB ** 2:
        return f'{size_bytes / _KIB:.1f} KB'
    if size_bytes < _KIB ** 3:
        return f'{size_bytes / _KIB ** 2:.1f} MB'
    return f'{size_bytes / _KIB ** 3:.1f} GB'


@admin.register(FileObj)
class FileObjAdmin(admin.ModelAdmin[FileObj]):
    """Admin interface for FileObj model."""

    list_display = [
        'full_name_display',
        'owner',
        'folder',
        'size_display',
        'is_deleted',
        'updated_at',
    ]

    list_filter = [
        'is_deleted',
        'ext',
        'updated_at',
    ]

    search_fields = [
        'file_name',
        'checksum_sha256',
    ]

    readonly_fields = [
        'id',
        'is_deleted',
        'size_bytes',
        'checksum_sha256',
        'created_at',
        'updated_at',
    ]

    fieldsets = (
        ('File Information', {
            'fields': ('id', 'file_name', 'ext', 'owner', 'folder'),
        }),
        ('Payload', {
            'fields': ('size_bytes', 'checksum_sha256'),
        }),
        ('Status', {
            'fields': ('is_deleted', 'created_at', 'updated_at'),
        }),
    )

    actions = ['mark_for_deletion']

    @admin.display(description='Name')
    def full_name_display(self, obj: FileObj) -> str:
        """Display file name joined with extension."""
        return obj.get_full_name()

    @admin.display(description='Size')
    def size_display(self, obj: FileObj) -> str:
        """Display payload size in human-readable format."""
        return format_size(obj.size_bytes)

    @admin.action(description='Mark selected files for deletion')
    def mark_for_deletion(
        self,
        request: HttpRequest,
        queryset: QuerySet[FileObj],
    ) -> None:
        """Soft delete selected records through the file service.

        Args:
            request: HTTP request.
            queryset: Selected records.
        """
        service = build_file_service()
        marked = 0
        for file_id in queryset.values_list('id', flat=True):
            response = service.set_deleted_status(file_id)
            if not response.message:
                marked += 1

        self.message_user(
            request,
            f'{marked} file(s) marked for deletion',
            messages.SUCCESS,
        )

    def get_queryset(self, request: HttpRequest) -> QuerySet[FileObj]:
        """Optimize queryset with select_related.

        Args:
            request: HTTP request.

        Returns:
            Optimized QuerySet.
        """
        return super().get_queryset(request).select_related('owner', 'folder')


@admin.register(Folder)
class FolderAdmin(admin.ModelAdmin[Folder]):
    """Admin interface for Folder model."""

    list_display = [
        'name',
        'owner',
        'file_count',
        'created_at',
    ]

    search_fields = ['name']

    @admin.display(description='Files')
    def file_count(self, obj: Folder) -> int:
        """Display number of live files in the folder."""
        return obj.live_file_count  # type: ignore[attr-defined]

    def get_queryset(self, request: HttpRequest) -> QuerySet[Folder]:
        """Annotate folders with their live file count.

        Args:
            request: HTTP request.

        Returns:
            Annotated QuerySet.
        """
        return super().get_queryset(request).select_related('owner').annotate(
            live_file_count=Count(
                'file_objects',
                filter=Q(file_objects__is_deleted=False),
            ),
        )
