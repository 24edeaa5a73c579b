"""
Uploaded image ➜ data: URI
– the URI is embedded straight into the page, so no file is kept around
– MIME type from the upload, the filename, or the file's magic bytes
"""
from __future__ import annotations
import base64, logging, mimetypes

from config import MAX_PHOTO_BYTES

log = logging.getLogger(__name__)

_MAGIC = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)

def _sniff(raw: bytes) -> str | None:
    for magic, mime in _MAGIC:
        if raw.startswith(magic):
            return mime
    if raw[:4] == b"RIFF" and raw[8:12] == b"WEBP":
        return "image/webp"
    return None

def image_to_data_uri(raw: bytes, filename: str | None = None, mime: str | None = None,
                      max_bytes: int = MAX_PHOTO_BYTES) -> str:
    if not raw:
        raise ValueError("Empty image upload")
    if len(raw) > max_bytes:
        raise ValueError(f"Image is {len(raw) / 1024 / 1024:.1f} MB, "
                         f"limit is {max_bytes / 1024 / 1024:.1f} MB")

    mime = mime or (mimetypes.guess_type(filename)[0] if filename else None) or _sniff(raw)
    if not mime or not mime.startswith("image/"):
        raise ValueError(f"Not an image: {filename or 'upload'} ({mime or 'unknown type'})")

    log.info("Loaded photo %s (%s, %d bytes)", filename or "<upload>", mime, len(raw))
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"
