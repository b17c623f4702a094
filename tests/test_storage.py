import io

import pytest
from fastapi import UploadFile

from config import settings
from services.storage import (
    InvalidUploadError,
    content_disposition,
    download_filename,
    read_text_upload,
)


def _upload(content: bytes, filename: str = "chart.txt") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


def test_read_text_upload() -> None:
    assert read_text_upload(_upload(b"C G\nAm F")) == "C G\nAm F"


def test_read_text_upload_strips_bom() -> None:
    assert read_text_upload(_upload("\ufeffC G".encode("utf-8"))) == "C G"


def test_read_text_upload_rejects_extension() -> None:
    with pytest.raises(InvalidUploadError):
        read_text_upload(_upload(b"C G", filename="chart.pdf"))


def test_read_text_upload_rejects_binary() -> None:
    with pytest.raises(InvalidUploadError):
        read_text_upload(_upload(b"\xff\xfe\x00C"))


def test_read_text_upload_size_limit(monkeypatch) -> None:
    monkeypatch.setattr(settings, "max_upload_bytes", 4)
    assert read_text_upload(_upload(b"C G")) == "C G"
    with pytest.raises(InvalidUploadError):
        read_text_upload(_upload(b"C G Am F"))


def test_download_filename() -> None:
    assert download_filename(None) == "transposed.txt"
    assert download_filename("   ") == "transposed.txt"
    assert download_filename("song") == "song.txt"
    assert download_filename("song.txt") == "song.txt"
    assert download_filename("../../etc/passwd") == "passwd.txt"
    assert download_filename('a"b') == "ab.txt"


def test_download_filename_drops_control_characters() -> None:
    assert download_filename("a\r\nX-Evil: 1") == "aX-Evil: 1.txt"
    assert download_filename("can\tción") == "canción.txt"


def test_content_disposition_ascii_name() -> None:
    assert content_disposition("song.txt") == 'attachment; filename="song.txt"'


def test_content_disposition_non_ascii_name() -> None:
    header = content_disposition("canción.txt")
    assert header == (
        "attachment; filename=\"cancion.txt\"; "
        "filename*=UTF-8''canci%C3%B3n.txt"
    )
    header.encode("latin-1")
