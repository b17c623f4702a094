import os
import logging
import unicodedata
from urllib.parse import quote

from fastapi import UploadFile

from config import settings

logger = logging.getLogger(__name__)

_UTF8_BOM = "\ufeff"


class InvalidUploadError(ValueError):
    pass


def read_text_upload(file: UploadFile) -> str:
    """Read an uploaded .txt chart as UTF-8 text.

    Nothing is written to disk; the content only feeds one transposition.
    """
    name = file.filename or ""
    if not name.lower().endswith(".txt"):
        raise InvalidUploadError(f"Only .txt files are accepted, got {name!r}")

    raw = file.file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise InvalidUploadError(
            f"File exceeds the {settings.max_upload_bytes} byte upload limit"
        )

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUploadError(f"File is not valid UTF-8 text: {exc}") from exc

    if text.startswith(_UTF8_BOM):
        text = text[len(_UTF8_BOM):]
    logger.info("Read upload %s (%d bytes)", name, len(raw))
    return text


def download_filename(name: str | None) -> str:
    """Normalize a user-supplied name for the transposed .txt download.

    Path components, quotes and control characters (CR, LF, ...) are dropped.
    """
    name = "".join(
        ch for ch in (name or "") if unicodedata.category(ch)[0] != "C"
    )
    name = os.path.basename(name.replace("\\", "/")).replace('"', "").strip()
    if not name:
        return settings.default_download_name
    return name if name.endswith(".txt") else f"{name}.txt"


def content_disposition(filename: str) -> str:
    """Build an attachment header that survives non-ASCII names.

    The plain filename is an ASCII fallback; filename* carries the
    UTF-8 name when it differs.
    """
    ascii_name = (
        unicodedata.normalize("NFKD", filename)
        .encode("ascii", "ignore")
        .decode("ascii")
        .strip()
    ) or settings.default_download_name
    header = f'attachment; filename="{ascii_name}"'
    quoted = quote(filename)
    if quoted != filename:
        header += f"; filename*=UTF-8''{quoted}"
    return header
