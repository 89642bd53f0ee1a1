"""
File Upload Utility - Store resume files for applications.

Supported formats:
- PDF (.pdf)
- Word (.doc, .docx)
- Plain Text (.txt)

Files are written under the configured upload directory and later served
verbatim from /uploads, so only the public path is stored on the record.
"""

import logging
import os
import re
from typing import Optional, Tuple

from app.core.exceptions import FileTooLargeError, ValidationError
from app.utils.ids import generate_id

log = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {'.pdf', '.doc', '.docx', '.txt'}
UPLOADS_URL_PREFIX = "/uploads"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def sanitize_filename(filename: str) -> str:
    """Drop any directory part and replace characters unsafe in a URL path."""
    name = os.path.basename(filename.replace("\\", "/"))
    return _UNSAFE_CHARS.sub("_", name).strip("._") or "resume"


def validate_resume(filename: Optional[str], content: bytes, max_bytes: int):
    """
    Check an uploaded resume before it is written.

    Raises:
        ValidationError on a missing name or unsupported extension
        FileTooLargeError if content exceeds max_bytes
    """
    if not filename:
        raise ValidationError("No filename provided")

    ext = get_file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            f"Unsupported file type '{ext}'. Allowed: PDF, DOC, DOCX, TXT"
        )

    if len(content) > max_bytes:
        raise FileTooLargeError(
            f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB"
        )


def store_resume(upload_dir: str, filename: str, content: bytes) -> Tuple[str, str]:
    """
    Write resume bytes under a name unique to this upload.

    Returns:
        Tuple of (path on disk, public resume_url)
    """
    os.makedirs(upload_dir, exist_ok=True)
    stored_name = f"{generate_id('resume')}-{sanitize_filename(filename)}"
    path = os.path.join(upload_dir, stored_name)
    # "xb": never overwrite another upload
    with open(path, "xb") as f:
        f.write(content)
    log.info("Stored resume %s (%d bytes)", stored_name, len(content))
    return path, f"{UPLOADS_URL_PREFIX}/{stored_name}"


def discard_resume(path: str):
    """Remove a stored resume whose application was not created."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
