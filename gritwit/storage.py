"""Storage backends for uploaded videos: the local filesystem or an R2 bucket."""

import datetime
import hashlib
import hmac
import urllib.error
import urllib.request
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
from urllib.parse import quote

_R2_HOST_SUFFIX = "r2.cloudflarestorage.com"
_REGION = "auto"
_SERVICE = "s3"
_ALGORITHM = "AWS4-HMAC-SHA256"


class StorageError(Exception):
    """Raised when a backend cannot be built or an upload fails."""


@dataclass
class R2Config:
    """Settings for the R2 backend; every field is required when it is used."""

    account_id: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    bucket: Optional[str] = None
    public_url: Optional[str] = None


@dataclass
class LocalStorage:
    """Writes uploads to a directory served under /videos."""

    directory: Path = Path("public/videos")

    def upload(self, key, data, content_type):
        """Save ``data`` as ``key`` and return its public path."""
        directory = Path(self.directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create upload dir: {exc}") from exc
        try:
            (directory / key).write_bytes(bytes(data))
        except OSError as exc:
            raise StorageError(f"Failed to save file: {exc}") from exc
        return f"/videos/{key}"


def _hmac(key, message):
    return hmac.new(key, message.encode("utf-8"), hashlib.sha256).digest()


@dataclass
class R2Storage:
    """Uploads to an R2 bucket with path-style, SigV4-signed PUT requests."""

    account_id: str
    access_key: str
    secret_key: str
    bucket: str
    public_url: str
    timeout: float = 60.0

    @property
    def host(self):
        return f"{self.account_id}.{_R2_HOST_SUFFIX}"

    def _request(self, path, data, content_type, now):
        uri = "/" + quote(f"{self.bucket}/{path}", safe="/-_.~")
        amz_date = now.strftime("%Y%m%dT%H%M%SZ")
        datestamp = now.strftime("%Y%m%d")
        payload_hash = hashlib.sha256(data).hexdigest()
        headers = {
            "content-type": content_type,
            "host": self.host,
            "x-amz-content-sha256": payload_hash,
            "x-amz-date": amz_date,
        }
        names = sorted(headers)
        signed_headers = ";".join(names)
        canonical_headers = "".join(f"{name}:{headers[name].strip()}\n" for name in names)
        canonical_request = "\n".join(
            ["PUT", uri, "", canonical_headers, signed_headers, payload_hash]
        )
        scope = f"{datestamp}/{_REGION}/{_SERVICE}/aws4_request"
        string_to_sign = "\n".join(
            [
                _ALGORITHM,
                amz_date,
                scope,
                hashlib.sha256(canonical_request.encode("utf-8")).hexdigest(),
            ]
        )
        key = _hmac(("AWS4" + self.secret_key).encode("utf-8"), datestamp)
        for part in (_REGION, _SERVICE, "aws4_request"):
            key = _hmac(key, part)
        signature = hmac.new(key, string_to_sign.encode("utf-8"), hashlib.sha256).hexdigest()
        headers["authorization"] = (
            f"{_ALGORITHM} Credential={self.access_key}/{scope}, "
            f"SignedHeaders={signed_headers}, Signature={signature}"
        )
        return urllib.request.Request(
            f"https://{self.host}{uri}", data=data, headers=headers, method="PUT"
        )

    def upload(self, key, data, content_type):
        """Store ``data`` under videos/``key`` and return its public URL."""
        path = f"videos/{key}"
        body = bytes(data)
        now = datetime.datetime.now(datetime.timezone.utc)
        request = self._request(path, body, content_type, now)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                response.read()
        except OSError as exc:
            raise StorageError(f"R2 upload failed: {exc}") from exc
        return f"{self.public_url.rstrip('/')}/{path}"


def _required(value, what):
    if value is None:
        raise StorageError(f"R2 {what} required")
    return value


def storage_from_config(backend, r2=None):
    """Build the backend named by ``backend``; anything but "r2" is local."""
    if backend != "r2":
        return LocalStorage()
    config = r2 if r2 is not None else R2Config()
    settings = {
        field.name: _required(getattr(config, field.name), field.name)
        for field in fields(R2Config)
    }
    return R2Storage(**settings)