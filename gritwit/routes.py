"""HTTP route handlers: the health check and the video upload."""

import logging
import uuid
from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional

from gritwit.storage import StorageError

ALLOWED_EXTENSIONS = ("mp4", "webm", "mov", "avi", "m4v")
MAX_UPLOAD_BYTES = 100 * 1024 * 1024

_log = logging.getLogger(__name__)


class UploadError(Exception):
    """An upload rejected with an HTTP status and a message for the client."""

    def __init__(self, status, message):
        super().__init__(message)
        self.status = HTTPStatus(status)
        self.message = message


@dataclass
class UploadField:
    """One part of a multipart form."""

    name: Optional[str]
    data: bytes = b""
    filename: Optional[str] = None
    content_type: Optional[str] = None


@dataclass
class UploadResponse:
    """Body returned after a successful upload."""

    url: str


def health_check():
    """Report that the service is up."""
    return HTTPStatus.OK


def is_valid_video_magic(data):
    """True if ``data`` starts with an MP4/MOV, WebM/MKV or AVI signature."""
    if len(data) < 12:
        return False
    head = bytes(data[:12])
    if head[4:8] == b"ftyp":
        return True
    if head[0:4] == b"\x1a\x45\xdf\xa3":
        return True
    return head[0:4] == b"RIFF" and head[8:12] == b"AVI "


def file_extension(filename):
    """Lower-cased extension of the last path component, or ""."""
    name = filename.rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        return ""
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot + 1 :].lower()


def validate_video(filename, content_type, data):
    """Check an uploaded file and return its extension; raise UploadError if unfit."""
    content_type = content_type or "application/octet-stream"
    if not content_type.startswith("video/"):
        raise UploadError(HTTPStatus.BAD_REQUEST, "Only video files are allowed")
    ext = file_extension(filename or "video.mp4")
    if ext not in ALLOWED_EXTENSIONS:
        raise UploadError(
            HTTPStatus.BAD_REQUEST,
            f"Unsupported file type '.{ext}'. Allowed: {', '.join(ALLOWED_EXTENSIONS)}",
        )
    if len(data) > MAX_UPLOAD_BYTES:
        raise UploadError(HTTPStatus.REQUEST_ENTITY_TOO_LARGE, "Video must be under 100 MB")
    if not is_valid_video_magic(data):
        raise UploadError(
            HTTPStatus.BAD_REQUEST,
            "File content does not match a supported video format",
        )
    return ext


def _session_user(user_id):
    if user_id is None:
        raise UploadError(HTTPStatus.UNAUTHORIZED, "Sign in to upload videos")
    try:
        return uuid.UUID(str(user_id))
    except ValueError:
        raise UploadError(HTTPStatus.UNAUTHORIZED, "Invalid session") from None


def upload_video(storage, fields, user_id):
    """Store the first form field named "video" for a signed-in user."""
    user_uuid = _session_user(user_id)
    for field in fields:
        if (field.name or "") != "video":
            continue
        original_name = field.filename or "video.mp4"
        content_type = field.content_type or "application/octet-stream"
        ext = validate_video(original_name, content_type, field.data)
        key = f"{uuid.uuid4()}.{ext}"
        try:
            url = storage.upload(key, field.data, content_type)
        except StorageError as exc:
            raise UploadError(HTTPStatus.INTERNAL_SERVER_ERROR, str(exc)) from exc
        _log.info(
            "video uploaded",
            extra={
                "user_id": str(user_uuid),
                "file": original_name,
                "size_bytes": len(field.data),
            },
        )
        return UploadResponse(url=url)
    raise UploadError(HTTPStatus.BAD_REQUEST, "No video field found")