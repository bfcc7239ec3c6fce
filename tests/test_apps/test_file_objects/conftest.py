"""Shared fixtures for file objects app tests."""

import uuid
from typing import BinaryIO

import boto3
import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from moto import mock_aws

from server.apps.file_objects.exceptions import BlobNotFoundError
from server.apps.file_objects.logic.dto import (
    FileFilter,
    FileObjDTO,
    FileServiceConfig,
    RecordPage,
)
from server.apps.file_objects.logic.file_service import FileService
from server.apps.file_objects.logic.mapper import FileObjMapper
from server.apps.file_objects.models import FileObj

User = get_user_model()

TEST_BUCKET = 'file-objects'


class InMemoryFileObjRepository:
    """Metadata store keeping records in a dict, recording every call."""

    def __init__(self) -> None:
        self.records: dict[uuid.UUID, FileObj] = {}
        self.saved: list[FileObj] = []
        self.filter_calls: list[FileFilter] = []

    def add(self, file_obj: FileObj) -> FileObj:
        """Seed a record without counting it as a save."""
        if file_obj.updated_at is None:
            file_obj.updated_at = timezone.now()
        if file_obj.created_at is None:
            file_obj.created_at = file_obj.updated_at
        self.records[file_obj.id] = file_obj
        return file_obj

    def save(self, file_obj: FileObj) -> FileObj:
        file_obj.updated_at = timezone.now()
        if file_obj.created_at is None:
            file_obj.created_at = file_obj.updated_at
        self.records[file_obj.id] = file_obj
        self.saved.append(file_obj)
        return file_obj

    def get_by_id(self, file_id: uuid.UUID) -> FileObj:
        try:
            return self.records[file_id]
        except KeyError as error:
            raise FileObj.DoesNotExist(file_id) from error

    def find_by_id(self, file_id: uuid.UUID) -> FileObj | None:
        return self.records.get(file_id)

    def filter(self, criteria: FileFilter) -> RecordPage[FileObj]:
        self.filter_calls.append(criteria)
        matched = [
            file_obj
            for file_obj in self.records.values()
            if file_obj.is_deleted == criteria.is_deleted
            and criteria.name.lower() in file_obj.file_name.lower()
        ]
        paginating = criteria.paginating
        return RecordPage(
            items=matched[
                paginating.offset:paginating.offset + paginating.page_size
            ],
            page=paginating.page,
            page_size=paginating.page_size,
            total_count=len(matched),
        )


class RecordingBlobStore:
    """Blob store keeping objects in memory, recording every put."""

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.puts: list[tuple[str, str, bytes]] = []
        self.error: Exception | None = None

    def put_object_into_bucket(
        self,
        bucket_name: str,
        stream: BinaryIO,
        key: str,
    ) -> None:
        content = stream.read()
        self.puts.append((bucket_name, key, content))
        if self.error is not None:
            raise self.error
        self.objects[(bucket_name, key)] = content

    def get_object_from_bucket(self, bucket_name: str, key: str) -> bytes:
        try:
            return self.objects[(bucket_name, key)]
        except KeyError as error:
            raise BlobNotFoundError(bucket_name, key) from error


class CountingMapper:
    """Translator delegating to FileObjMapper, recording each record."""

    def __init__(self) -> None:
        self.translated: list[FileObj] = []
        self._mapper = FileObjMapper()

    def to_dto(self, file_obj: FileObj) -> FileObjDTO:
        self.translated.append(file_obj)
        return self._mapper.to_dto(file_obj)


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def repository():
    """In-memory metadata store."""
    return InMemoryFileObjRepository()


@pytest.fixture
def blob_store():
    """In-memory blob store."""
    return RecordingBlobStore()


@pytest.fixture
def mapper():
    """Translator counting its calls."""
    return CountingMapper()


@pytest.fixture
def service_config():
    """Service configuration pointing at the test bucket."""
    return FileServiceConfig(bucket_name=TEST_BUCKET)


@pytest.fixture
def file_service(repository, blob_store, mapper, service_config):
    """FileService wired with in-memory collaborators."""
    return FileService(
        repository=repository,
        blob_store=blob_store,
        translator=mapper,
        config=service_config,
    )


@pytest.fixture
def mock_s3():
    """Mock S3 service with the file objects bucket.

    Yields:
        boto3 S3 resource with the bucket created.
    """
    with mock_aws():
        conn = boto3.resource('s3', region_name='us-east-1')
        conn.create_bucket(Bucket=TEST_BUCKET)

        yield conn
