import io
from pathlib import Path

import pytest
import pytesseract
from PIL import Image

import floating_dictionary.core.ocr as ocr
from floating_dictionary.core.image_loader import load_and_remove
from floating_dictionary.core.ocr import TesseractExtractor
from floating_dictionary.errors import CaptureProtocolError, OcrError


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (20, 10), (255, 255, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_extract_passes_language_and_tessdata_dir(monkeypatch) -> None:
    calls: list[tuple[str, str]] = []

    def fake_image_to_string(image, lang, config):
        calls.append((lang, config))
        return "hello\n"

    monkeypatch.setattr(ocr.pytesseract, "image_to_string", fake_image_to_string)

    text = TesseractExtractor(tessdata_dir=Path("/opt/tessdata")).extract(_png_bytes(), "eng+tha")

    assert text == "hello\n"
    assert calls == [("eng+tha", '--tessdata-dir "/opt/tessdata"')]


def test_extract_rejects_unreadable_image() -> None:
    with pytest.raises(OcrError):
        TesseractExtractor().extract(b"definitely not an image", "eng")


def test_extract_rejects_empty_result(monkeypatch) -> None:
    monkeypatch.setattr(ocr.pytesseract, "image_to_string", lambda image, lang, config: " \n\f")

    with pytest.raises(OcrError):
        TesseractExtractor().extract(_png_bytes(), "eng")


def test_extract_wraps_tesseract_errors(monkeypatch) -> None:
    def fail(image, lang, config):
        raise pytesseract.TesseractError(1, "Failed loading language 'xyz'")

    monkeypatch.setattr(ocr.pytesseract, "image_to_string", fail)

    with pytest.raises(OcrError, match="xyz"):
        TesseractExtractor().extract(_png_bytes(), "xyz")


def test_load_and_remove_deletes_file(tmp_path) -> None:
    shot = tmp_path / "capture.png"
    shot.write_bytes(b"image-bytes")

    assert load_and_remove(shot) == b"image-bytes"
    assert not shot.exists()


def test_load_missing_file_is_protocol_error(tmp_path) -> None:
    with pytest.raises(CaptureProtocolError):
        load_and_remove(tmp_path / "missing.png")
