from typing import Optional

MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
ALLOWED_FILE_TYPES = ("application/pdf",)


class UploadRejectedError(ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def validate_pdf_upload(field: str, filename: Optional[str], content_type: Optional[str], size: Optional[int]) -> None:
    """Reject a missing, oversized or non-PDF upload before any extraction happens."""
    if not filename or size is None:
        raise UploadRejectedError(field, f"{field} file is required")
    if size > MAX_FILE_SIZE:
        raise UploadRejectedError(field, f"File size must be less than {MAX_FILE_SIZE // (1024 * 1024)}MB")
    if content_type not in ALLOWED_FILE_TYPES:
        raise UploadRejectedError(field, "Only PDF files are allowed")


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value, i = float(num_bytes), 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {units[i]}"
