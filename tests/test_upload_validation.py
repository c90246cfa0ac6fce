from __future__ import annotations

from vendor_console_sdk.upload_validation import (
    GIB,
    MIB,
    UploadCandidate,
    digital_file_slot,
    thumbnail_slot,
    validate_digital_file,
    validate_thumbnail,
)


def _file(name: str, content_type: str, size: int) -> UploadCandidate:
    return UploadCandidate(name=name, content_type=content_type, size=size)


def test_thumbnail_rejects_large_png() -> None:
    result = validate_thumbnail(_file("cover.png", "image/png", 3 * MIB))
    assert not result.ok
    assert result.reason == "Image must be smaller than 2MB"


def test_thumbnail_accepts_small_webp() -> None:
    candidate = _file("cover.webp", "image/webp", 1 * MIB)
    result = validate_thumbnail(candidate)
    assert result.ok
    assert result.file == candidate


def test_thumbnail_rejects_other_types() -> None:
    result = validate_thumbnail(_file("cover.gif", "image/gif", 10))
    assert result.reason == "Only JPG, PNG, and WebP images are allowed"


def test_zip_extension_accepted_without_known_type() -> None:
    assert validate_digital_file(_file("bundle.ZIP", "", 5 * MIB), for_submission=True).ok


def test_digital_file_rejects_unknown_type() -> None:
    result = validate_digital_file(_file("tool.exe", "application/x-msdownload", 10))
    assert result.reason == "Unsupported file type"


def test_selection_and_submission_limits_differ() -> None:
    large = _file("course.mp4", "video/mp4", 500 * MIB)
    assert validate_digital_file(large).ok
    assert validate_digital_file(large, for_submission=True).reason == "File size exceeds 100MB limit"
    huge = _file("course.mp4", "video/mp4", 3 * GIB)
    assert validate_digital_file(huge).reason == "File size exceeds 2GB limit"


def test_rejected_selection_clears_slot() -> None:
    slot = thumbnail_slot()
    slot.select(_file("ok.jpg", "image/jpeg", 100))
    assert slot.file is not None
    slot.select(_file("big.jpg", "image/jpeg", 5 * MIB))
    assert slot.file is None
    assert slot.error == "Image must be smaller than 2MB"


def test_submission_check_clears_oversized_file() -> None:
    slot = digital_file_slot()
    slot.select(_file("course.mp4", "video/mp4", 150 * MIB))
    assert slot.file is not None
    result = slot.validate_for_submission()
    assert not result.ok
    assert slot.file is None


def test_empty_slot_fails_submission() -> None:
    assert digital_file_slot().validate_for_submission().reason == "No file selected"


def test_candidate_from_path(tmp_path) -> None:
    path = tmp_path / "guide.pdf"
    path.write_bytes(b"%PDF-1.4" + b"0" * 100)
    candidate = UploadCandidate.from_path(path)
    assert candidate.content_type == "application/pdf"
    assert candidate.size == 108
    assert candidate.extension == "pdf"
    with candidate.open() as handle:
        assert handle.read(4) == b"%PDF"
