from __future__ import annotations

import io
import logging
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable

logger = logging.getLogger(__name__)

MIB = 1024 * 1024
GIB = 1024 * MIB

THUMBNAIL_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})
THUMBNAIL_MAX_BYTES = 2 * MIB

DIGITAL_FILE_TYPES = frozenset(
    {
        "application/pdf",
        "audio/mp3",
        "audio/mpeg",
        "video/mp4",
        "application/zip",
        "application/x-zip-compressed",
    }
)
DIGITAL_FILE_EXTENSIONS = frozenset({"zip"})
# Selection only pre-filters; the submission limit is the one enforced
# before anything is uploaded.
DIGITAL_FILE_SELECTION_MAX_BYTES = 2 * GIB
DIGITAL_FILE_SUBMISSION_MAX_BYTES = 100 * MIB


@dataclass(frozen=True)
class UploadCandidate:
    name: str
    content_type: str
    size: int
    path: Path | None = None
    content: bytes | None = None

    @property
    def extension(self) -> str:
        _, dot, ext = self.name.rpartition(".")
        return ext.lower() if dot else ""

    @property
    def size_label(self) -> str:
        return f"{self.size / MIB:.2f}MB"

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> "UploadCandidate":
        resolved = Path(path)
        guessed, _ = mimetypes.guess_type(resolved.name)
        return cls(
            name=resolved.name,
            content_type=content_type or guessed or "",
            size=resolved.stat().st_size,
            path=resolved,
        )

    @classmethod
    def from_bytes(cls, name: str, content: bytes, content_type: str) -> "UploadCandidate":
        return cls(name=name, content_type=content_type, size=len(content), content=content)

    def open(self) -> BinaryIO:
        if self.content is not None:
            return io.BytesIO(self.content)
        if self.path is None:
            raise ValueError(f"{self.name} has no content to upload")
        return self.path.open("rb")


@dataclass(frozen=True)
class UploadValidation:
    file: UploadCandidate | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, file: UploadCandidate) -> "UploadValidation":
        return cls(file=file)

    @classmethod
    def reject(cls, reason: str) -> "UploadValidation":
        return cls(reason=reason)


@dataclass(frozen=True)
class UploadRules:
    allowed_types: frozenset[str]
    max_bytes: int
    type_message: str
    size_message: str
    allowed_extensions: frozenset[str] = frozenset()

    def check(self, candidate: UploadCandidate) -> UploadValidation:
        content_type = (candidate.content_type or "").lower()
        if content_type not in self.allowed_types and candidate.extension not in self.allowed_extensions:
            return UploadValidation.reject(self.type_message)
        if candidate.size > self.max_bytes:
            return UploadValidation.reject(self.size_message)
        return UploadValidation.accept(candidate)


THUMBNAIL_RULES = UploadRules(
    allowed_types=THUMBNAIL_TYPES,
    max_bytes=THUMBNAIL_MAX_BYTES,
    type_message="Only JPG, PNG, and WebP images are allowed",
    size_message="Image must be smaller than 2MB",
)
DIGITAL_FILE_SELECTION_RULES = UploadRules(
    allowed_types=DIGITAL_FILE_TYPES,
    allowed_extensions=DIGITAL_FILE_EXTENSIONS,
    max_bytes=DIGITAL_FILE_SELECTION_MAX_BYTES,
    type_message="Unsupported file type",
    size_message="File size exceeds 2GB limit",
)
DIGITAL_FILE_SUBMISSION_RULES = UploadRules(
    allowed_types=DIGITAL_FILE_TYPES,
    allowed_extensions=DIGITAL_FILE_EXTENSIONS,
    max_bytes=DIGITAL_FILE_SUBMISSION_MAX_BYTES,
    type_message="Unsupported file type",
    size_message="File size exceeds 100MB limit",
)


def validate_thumbnail(candidate: UploadCandidate) -> UploadValidation:
    return THUMBNAIL_RULES.check(candidate)


def validate_digital_file(candidate: UploadCandidate, *, for_submission: bool = False) -> UploadValidation:
    rules = DIGITAL_FILE_SUBMISSION_RULES if for_submission else DIGITAL_FILE_SELECTION_RULES
    return rules.check(candidate)


Validator = Callable[[UploadCandidate], UploadValidation]


@dataclass
class UploadSlot:
    """Selected-file state for one file input.

    A rejected file never stays selected, so a stale reference cannot reach
    the upload call.
    """

    name: str
    on_select: Validator
    on_submit: Validator | None = None
    file: UploadCandidate | None = None
    error: str | None = field(default=None)

    def select(self, candidate: UploadCandidate) -> UploadValidation:
        result = self.on_select(candidate)
        self._apply(result)
        return result

    def validate_for_submission(self) -> UploadValidation:
        if self.file is None:
            return UploadValidation.reject(f"No {self.name} selected")
        result = (self.on_submit or self.on_select)(self.file)
        self._apply(result)
        return result

    def clear(self) -> None:
        self.file = None
        self.error = None

    def _apply(self, result: UploadValidation) -> None:
        if result.ok:
            self.file = result.file
            self.error = None
            return
        logger.info("upload_rejected", extra={"slot": self.name, "reason": result.reason})
        self.file = None
        self.error = result.reason


def thumbnail_slot() -> UploadSlot:
    return UploadSlot(name="thumbnail", on_select=validate_thumbnail)


def digital_file_slot() -> UploadSlot:
    return UploadSlot(
        name="file",
        on_select=validate_digital_file,
        on_submit=lambda candidate: validate_digital_file(candidate, for_submission=True),
    )
