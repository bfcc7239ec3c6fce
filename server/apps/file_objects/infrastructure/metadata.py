"""Payload helpers: stream conversion, checksum, extension handling."""

import hashlib
from io import BytesIO
from typing import BinaryIO, Final

_CHUNK_SIZE: Final = 8192  # 8KB chunks for checksum calculation
_ENCODING: Final = 'utf-8'


def has_payload(file_data: str | bytes | None) -> bool:
    """Check whether request data carries a non-empty payload.

    Args:
        file_data: Raw payload from a create or update request.

    Returns:
        True if there is something to write to the blob store.
    """
    return bool(file_data)


def to_stream(file_data: str | bytes) -> BinaryIO:
    """Wrap a payload into a binary stream positioned at start.

    Text payloads are encoded as UTF-8.

    Args:
        file_data: Payload as text or bytes.

    Returns:
        In-memory binary stream with the payload.
    """
    if isinstance(file_data, str):
        file_data = file_data.encode(_ENCODING)
    return BytesIO(file_data)


def calculate_checksum(file_obj: BinaryIO) -> str:
    """Calculate SHA256 checksum of a stream.

    Reads the stream in chunks and rewinds it afterwards, so the same
    stream can be uploaded next.

    Args:
        file_obj: File-like object to checksum.

    Returns:
        Hex-encoded SHA256 hash string.
    """
    sha256_hash = hashlib.sha256()

    file_obj.seek(0)
    for chunk in iter(lambda: file_obj.read(_CHUNK_SIZE), b''):
        sha256_hash.update(chunk)
    file_obj.seek(0)

    return sha256_hash.hexdigest()


def get_stream_size(file_obj: BinaryIO) -> int:
    """Get size of a seekable stream without consuming it.

    Args:
        file_obj: Seekable file-like object.

    Returns:
        Size in bytes.
    """
    file_obj.seek(0, 2)
    size = file_obj.tell()
    file_obj.seek(0)
    return size


def normalize_extension(ext: str) -> str:
    """Normalize an extension for storage.

    Example: '.PY' -> 'py'

    Args:
        ext: Extension with or without leading dot.

    Returns:
        Extension without dot, lowercase.
    """
    return ext.strip().lstrip('.').lower()
