"""JSON HTTP views over the file object lifecycle.

Views only parse input, call FileService and serialize its
FileResponse. Missing records map to 404, malformed input to 400.
"""

import dataclasses
import json
import logging
import uuid
from datetime import datetime
from typing import Any, Final

from django.contrib.auth import get_user_model
from django.db import IntegrityError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from server.apps.file_objects.exceptions import FileDataNotFoundError
from server.apps.file_objects.logic.dto import (
    FileFilter,
    FileObjDTO,
    FileResponse,
    Paginating,
)
from server.apps.file_objects.logic.file_service import (
    FileService,
    build_file_service,
)
from server.apps.file_objects.models import FileObj, Folder

_HTTP_CREATED: Final = 201
_HTTP_BAD_REQUEST: Final = 400
_HTTP_NOT_FOUND: Final = 404

_TEXT_FIELDS: Final = ('file_name', 'ext', 'file_data')
_ID_FIELDS: Final = ('owner_id', 'folder_id')
_FLAG_FIELDS: Final = ('has_data', 'in_root')
_PAGINATING_FIELDS: Final = ('page_size', 'page')

logger = logging.getLogger(__name__)


def get_file_service() -> FileService:
    """Get the service used by the views.

    Returns:
        FileService wired with production collaborators.
    """
    return build_file_service()


def _load_json(request: HttpRequest) -> dict[str, Any]:
    payload = json.loads(request.body or b'{}')
    if not isinstance(payload, dict):
        raise ValueError('Request body must be a JSON object')
    return payload


def _typed_field(
    payload: dict[str, Any],
    name: str,
    expected: type | tuple[type, ...],
) -> Any:
    value = payload.get(name)
    # bool is an int subclass, never accept it where an id is expected
    if value is None or (
        isinstance(value, expected) and not (
            isinstance(value, bool) and expected is int
        )
    ):
        return value
    raise ValueError(f'Field {name!r} has invalid type')


def _parse_datetime_field(payload: dict[str, Any], name: str) -> datetime | None:
    raw_value = _typed_field(payload, name, str)
    if raw_value is None:
        return None

    parsed = parse_datetime(raw_value)
    if parsed is None:
        raise ValueError(f'Field {name!r} is not an ISO 8601 datetime')
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def parse_file_request(payload: dict[str, Any]) -> FileObjDTO:
    """Build a create/update request from a JSON object.

    Args:
        payload: Decoded JSON body.

    Returns:
        Request DTO, absent fields left as None.

    Raises:
        ValueError: If a field has the wrong type.
    """
    fields: dict[str, Any] = {
        name: _typed_field(payload, name, str) for name in _TEXT_FIELDS
    }
    fields.update(
        (name, _typed_field(payload, name, int)) for name in _ID_FIELDS
    )
    return FileObjDTO(**fields)


def check_references(file_request: FileObjDTO) -> None:
    """Ensure the owner and folder a request points at exist.

    Args:
        file_request: Parsed create request.

    Raises:
        ValueError: If ``owner_id`` or ``folder_id`` is unknown.
    """
    owner_id = file_request.owner_id
    if owner_id is not None and not (
        get_user_model().objects.filter(pk=owner_id).exists()
    ):
        raise ValueError(f'Owner {owner_id} does not exist')

    folder_id = file_request.folder_id
    if folder_id is not None and not (
        Folder.objects.filter(pk=folder_id).exists()
    ):
        raise ValueError(f'Folder {folder_id} does not exist')


def parse_file_filter(payload: dict[str, Any]) -> FileFilter:
    """Build filter criteria from a JSON object.

    Args:
        payload: Decoded JSON body.

    Returns:
        Filter criteria.

    Raises:
        ValueError: If a field has the wrong type or pagination is
            out of bounds.
    """
    raw_paginating = _typed_field(payload, 'paginating', dict) or {}
    paginating = Paginating(**{
        name: _typed_field(raw_paginating, name, int)
        for name in _PAGINATING_FIELDS
        if raw_paginating.get(name) is not None
    })

    return FileFilter(
        paginating=paginating,
        is_deleted=bool(_typed_field(payload, 'is_deleted', bool)),
        name=_typed_field(payload, 'name', str) or '',
        ext=_typed_field(payload, 'ext', str) or '',
        updated_from=_parse_datetime_field(payload, 'updated_from'),
        updated_to=_parse_datetime_field(payload, 'updated_to'),
        **{name: _typed_field(payload, name, bool) for name in _FLAG_FIELDS},
        **{name: _typed_field(payload, name, int) for name in _ID_FIELDS},
    )


def _to_json(response: FileResponse, status: int = 200) -> JsonResponse:
    return JsonResponse(dataclasses.asdict(response), status=status)


def _error(message: str, status: int) -> JsonResponse:
    return _to_json(FileResponse(success=False, message=message), status)


@method_decorator(csrf_exempt, name='dispatch')
class FileObjCollectionView(View):
    """Create file objects."""

    http_method_names = ['post']

    def post(self, request: HttpRequest) -> JsonResponse:
        """Create a file object from a JSON body."""
        try:
            file_request = parse_file_request(_load_json(request))
            check_references(file_request)
        except ValueError as error:
            return _error(str(error), _HTTP_BAD_REQUEST)

        try:
            response = get_file_service().create(file_request)
        except IntegrityError:
            # owner or folder removed after the reference check
            logger.warning('Create referenced a missing owner or folder')
            return _error('Owner or folder does not exist', _HTTP_BAD_REQUEST)
        return _to_json(response, status=_HTTP_CREATED)


@method_decorator(csrf_exempt, name='dispatch')
class FileObjFilterView(View):
    """Filter file objects."""

    http_method_names = ['post']

    def post(self, request: HttpRequest) -> JsonResponse:
        """Return one page of file objects matching a JSON filter."""
        try:
            criteria = parse_file_filter(_load_json(request))
        except ValueError as error:
            return _error(str(error), _HTTP_BAD_REQUEST)

        return _to_json(get_file_service().filter(criteria))


@method_decorator(csrf_exempt, name='dispatch')
class FileObjDetailView(View):
    """Update or soft delete one file object."""

    http_method_names = ['patch', 'delete']

    def patch(self, request: HttpRequest, file_id: uuid.UUID) -> JsonResponse:
        """Update a file object from a JSON body."""
        try:
            file_request = parse_file_request(_load_json(request))
        except ValueError as error:
            return _error(str(error), _HTTP_BAD_REQUEST)

        try:
            response = get_file_service().update(file_id, file_request)
        except FileObj.DoesNotExist:
            logger.warning('Update of unknown file object: %s', file_id)
            return _error(f'File object {file_id} not found', _HTTP_NOT_FOUND)
        return _to_json(response)

    def delete(self, request: HttpRequest, file_id: uuid.UUID) -> JsonResponse:
        """Soft delete a file object."""
        try:
            response = get_file_service().set_deleted_status(file_id)
        except FileObj.DoesNotExist:
            logger.warning('Delete of unknown file object: %s', file_id)
            return _error(f'File object {file_id} not found', _HTTP_NOT_FOUND)
        return _to_json(response)


class FileObjDataView(View):
    """Download the payload of one file object."""

    http_method_names = ['get']

    def get(self, request: HttpRequest, file_id: uuid.UUID) -> HttpResponse:
        """Stream back the stored payload."""
        try:
            content = get_file_service().read_file_data(file_id)
        except (FileObj.DoesNotExist, FileDataNotFoundError):
            return _error(f'No file data for {file_id}', _HTTP_NOT_FOUND)
        return HttpResponse(content, content_type='application/octet-stream')
