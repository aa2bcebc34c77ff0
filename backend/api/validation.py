"""Upload validation for the analyze route."""

from typing import Protocol

from services.exceptions import InvalidFormField, InvalidUpload, MissingFile, UnsupportedFileType


class NamedUpload(Protocol):
    filename: str | None


def is_pdf_filename(filename: str | None) -> bool:
    # Suffix check only, case-sensitive; content is not inspected
    return bool(filename) and filename.endswith(".pdf")


def validate_resume_upload(upload: NamedUpload | None) -> NamedUpload:
    """Return the upload unchanged, or raise the matching InvalidUpload."""
    if upload is None:
        raise MissingFile()
    if not is_pdf_filename(upload.filename):
        raise UnsupportedFileType()
    return upload


def upload_error_from_validation(errors) -> InvalidUpload:
    """Map FastAPI body validation errors onto the upload error taxonomy.

    Anything wrong with the `resume` part means no usable file was sent.
    """
    fields = [str(err["loc"][-1]) for err in errors if len(err.get("loc", ())) > 1]
    if "resume" in fields:
        return MissingFile()
    return InvalidFormField(fields[0] if fields else None)
