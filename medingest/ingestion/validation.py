from medingest.ingestion.exceptions import ValidationError
from medingest.ingestion.models import ACCEPTED_MEDIA_TYPES, SourceFile

MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024


def validate_source(
    source: SourceFile | None,
    title: str | None,
    max_size_bytes: int = MAX_FILE_SIZE_BYTES,
) -> SourceFile:
    """Check ingestion preconditions and return the source file.

    Raises:
        ValidationError: on a missing file or title, an unsupported media
            type, or an empty or oversized file.
    """
    if source is None or title is None or not title.strip():
        raise ValidationError("Please select a file and provide a title")
    validate_file(source, max_size_bytes)
    return source


def validate_file(source: SourceFile, max_size_bytes: int = MAX_FILE_SIZE_BYTES) -> None:
    if source.media_type not in ACCEPTED_MEDIA_TYPES:
        raise ValidationError(
            f"Invalid file type '{source.media_type}'. "
            "Please upload PDF, JPG, or PNG files only"
        )
    if source.size_bytes == 0:
        raise ValidationError(f"File '{source.file_name}' is empty")
    if source.size_bytes > max_size_bytes:
        raise ValidationError(
            f"File too large: {source.size_bytes} bytes "
            f"(max {max_size_bytes // (1024 * 1024)}MB)"
        )
