"""Tests for lifecycle value objects and the record mapper."""

import uuid

import pytest

from server.apps.file_objects.exceptions import InvalidPaginationError
from server.apps.file_objects.logic.dto import (
    MAX_PAGE_SIZE,
    FileFilter,
    Paginating,
    RecordPage,
)
from server.apps.file_objects.logic.mapper import FileObjMapper
from server.apps.file_objects.models import FileObj


class TestPaginating:
    """Tests for Paginating bounds."""

    def test_offset(self):
        """Test offset is page index times page size."""
        assert Paginating(page_size=10, page=3).offset == 30

    @pytest.mark.parametrize(('page_size', 'page'), [
        (0, 0),
        (MAX_PAGE_SIZE + 1, 0),
        (10, -1),
    ])
    def test_out_of_bounds(self, page_size, page):
        """Test invalid page requests are rejected at construction."""
        with pytest.raises(InvalidPaginationError):
            Paginating(page_size=page_size, page=page)

    def test_max_page_size_accepted(self):
        """Test the upper bound itself is valid."""
        assert Paginating(page_size=MAX_PAGE_SIZE).page_size == MAX_PAGE_SIZE


def test_filter_defaults_hide_deleted():
    """Test default filter only matches live records on the first page."""
    criteria = FileFilter()

    assert criteria.is_deleted is False
    assert criteria.paginating.page == 0


def test_record_page_has_next():
    """Test has_next reflects records beyond the current page."""
    assert RecordPage(items=[1, 2], page=0, page_size=2, total_count=3).has_next
    assert not RecordPage(items=[3], page=1, page_size=2, total_count=3).has_next


def test_mapper_copies_fields_and_hides_payload():
    """Test mapper projects every field and leaves file_data empty."""
    file_obj = FileObj(
        id=uuid.uuid4(),
        file_name='report',
        ext='pdf',
        size_bytes=42,
        checksum_sha256='f' * 64,
    )

    dto = FileObjMapper().to_dto(file_obj)

    assert dto.id == file_obj.id
    assert dto.file_name == 'report'
    assert dto.ext == 'pdf'
    assert dto.size_bytes == 42
    assert dto.is_deleted is False
    assert dto.owner_id is None
    assert dto.file_data is None
