"""Value objects passed in and out of the file lifecycle."""

import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Final, Generic, TypeVar, final

from server.apps.file_objects.exceptions import InvalidPaginationError

MAX_PAGE_SIZE: Final = 256
_DEFAULT_PAGE_SIZE: Final = 20

_ItemT = TypeVar('_ItemT')


@final
@dataclass(frozen=True, slots=True)
class FileServiceConfig:
    """Plain configuration handed to FileService at construction."""

    bucket_name: str


@final
@dataclass(slots=True)
class FileObjDTO:
    """Caller-facing shape of a file object.

    Used both ways: as a create/update request, where every field is
    optional, and as a read result produced by the translator. On reads
    ``file_data`` is always None, payloads are write-only.
    """

    id: uuid.UUID | None = None
    file_name: str | None = None
    ext: str | None = None
    owner_id: int | None = None
    folder_id: int | None = None
    is_deleted: bool = False
    size_bytes: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    file_data: str | bytes | None = None


@final
@dataclass(frozen=True, slots=True)
class FileResponse:
    """Result envelope of every lifecycle operation.

    ``file_obj_pages`` is None for delete-type operations and a list
    (possibly empty) for everything else.
    """

    success: bool
    message: str = ''
    file_obj_pages: list[FileObjDTO] | None = None


@final
@dataclass(frozen=True, slots=True)
class Paginating:
    """Page request: page size and zero-based page index."""

    page_size: int = _DEFAULT_PAGE_SIZE
    page: int = 0

    def __post_init__(self) -> None:
        """Validate bounds.

        Raises:
            InvalidPaginationError: If page_size or page is out of range.
        """
        if not 1 <= self.page_size <= MAX_PAGE_SIZE or self.page < 0:
            raise InvalidPaginationError(
                page_size=self.page_size,
                page=self.page,
                max_page_size=MAX_PAGE_SIZE,
            )

    @property
    def offset(self) -> int:
        """Index of the first record of the page."""
        return self.page * self.page_size


@final
@dataclass(frozen=True, slots=True)
class FileFilter:
    """Immutable filter over file objects.

    Every predicate left at its default matches all records, except
    ``is_deleted`` which defaults to hiding soft-deleted ones.

    Attributes:
        paginating: Page to return.
        is_deleted: Soft-delete flag the records must have.
        has_data: Records that did (True) or did not (False) receive a
            payload. None disables the predicate.
        in_root: Records outside any folder (True) or inside one (False).
            None disables the predicate.
        name: Case-insensitive substring of the file name.
        ext: Case-insensitive extension, without leading dot.
        owner_id: Owner user id.
        folder_id: Folder id.
        updated_from: Inclusive lower bound of ``updated_at``.
        updated_to: Inclusive upper bound of ``updated_at``.
    """

    paginating: Paginating = field(default_factory=Paginating)
    is_deleted: bool = False
    has_data: bool | None = None
    in_root: bool | None = None
    name: str = ''
    ext: str = ''
    owner_id: int | None = None
    folder_id: int | None = None
    updated_from: datetime | None = None
    updated_to: datetime | None = None


@final
@dataclass(frozen=True, slots=True)
class RecordPage(Generic[_ItemT]):
    """Ordered, bounded slice of a result set plus its total size."""

    items: list[_ItemT]
    page: int
    page_size: int
    total_count: int

    def __len__(self) -> int:
        """Number of records on this page."""
        return len(self.items)

    def __iter__(self) -> Iterator[_ItemT]:
        """Iterate records in store order."""
        return iter(self.items)

    @property
    def has_next(self) -> bool:
        """Whether records exist past this page."""
        return (self.page + 1) * self.page_size < self.total_count
