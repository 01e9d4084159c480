# tagcontent/domain/policies/media_classifier.py
"""
Coarse media classification (image / video / audio / document) of a URL,
optionally helped by a MIME hint. Pure functions, no I/O.
"""
from __future__ import annotations

from posixpath import basename, splitext
from typing import Dict, Iterable, Optional, Tuple
from urllib.parse import unquote, urlsplit

from tagcontent.domain.enums import MediaType

# Checked in this order; "ogg" appears in both video and audio and resolves to video.
EXTENSION_SETS: Tuple[Tuple[MediaType, frozenset], ...] = (
    (MediaType.image, frozenset({"jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tiff"})),
    (MediaType.video, frozenset({"mp4", "webm", "ogg", "avi", "mov", "wmv", "flv", "m4v", "3gp", "mkv"})),
    (MediaType.audio, frozenset({"mp3", "wav", "ogg", "aac", "flac", "m4a", "wma"})),
    (MediaType.document, frozenset({"pdf", "doc", "docx", "txt", "rtf", "xls", "xlsx", "ppt", "pptx"})),
)

DEFAULT_VIDEO_HOSTS: Tuple[str, ...] = ("youtube.com", "youtu.be", "vimeo.com", "wistia.com")

MIME_TYPES: Dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "bmp": "image/bmp",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "ogg": "video/ogg",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "aac": "audio/aac",
    "flac": "audio/flac",
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
DEFAULT_MIME_TYPE = "image/jpeg"


def url_path(url: str) -> str:
    """Path component of a URL with query and fragment removed."""
    if not url:
        return ""
    return unquote(urlsplit(url).path or "")


def url_extension(url: str) -> str:
    """Lowercased extension of the URL path, without the dot ('' if none)."""
    ext = splitext(basename(url_path(url)))[1]
    return ext[1:].lower() if ext else ""


def url_basename(url: str) -> str:
    return basename(url_path(url).rstrip("/"))


def type_from_mime(mime_hint: Optional[str]) -> Optional[MediaType]:
    m = (mime_hint or "").strip().lower()
    if not m:
        return None
    if m.startswith("image/"):
        return MediaType.image
    if m.startswith("video/"):
        return MediaType.video
    if m.startswith("audio/"):
        return MediaType.audio
    if m.startswith("application/pdf") or m.startswith("text/"):
        return MediaType.document
    return None


def classify(
    url: str,
    mime_hint: Optional[str] = None,
    *,
    video_hosts: Iterable[str] = DEFAULT_VIDEO_HOSTS,
) -> MediaType:
    """
    Decide the coarse type of `url`:
      1. a recognized MIME hint wins
      2. then the path extension (query/fragment ignored)
      3. then known video hosting domains (case-insensitive)
      4. otherwise image
    """
    by_mime = type_from_mime(mime_hint)
    if by_mime is not None:
        return by_mime

    ext = url_extension(url)
    if ext:
        for media_type, extensions in EXTENSION_SETS:
            if ext in extensions:
                return media_type

    lowered = (url or "").lower()
    if any(host and host.lower() in lowered for host in video_hosts):
        return MediaType.video

    return MediaType.image


def guess_mime_type(url: str) -> str:
    return MIME_TYPES.get(url_extension(url), DEFAULT_MIME_TYPE)
