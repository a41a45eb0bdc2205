import pytest

from parsers.upload import MAX_FILE_SIZE, UploadRejectedError, format_file_size, validate_pdf_upload


def test_accepts_pdf_at_limit():
    validate_pdf_upload("cv", "cv.pdf", "application/pdf", MAX_FILE_SIZE)


@pytest.mark.parametrize("filename, content_type, size, message", [
    (None, None, None, "cv file is required"),
    ("", "application/pdf", 10, "cv file is required"),
    ("cv.pdf", "application/pdf", MAX_FILE_SIZE + 1, "File size must be less than 5MB"),
    ("cv.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document", 10,
     "Only PDF files are allowed"),
    ("cv.pdf", None, 10, "Only PDF files are allowed"),
])
def test_rejections(filename, content_type, size, message):
    with pytest.raises(UploadRejectedError) as exc_info:
        validate_pdf_upload("cv", filename, content_type, size)

    assert exc_info.value.message == message
    assert exc_info.value.field == "cv"


@pytest.mark.parametrize("size, expected", [
    (0, "0 Bytes"),
    (512, "512 Bytes"),
    (1536, "1.5 KB"),
    (MAX_FILE_SIZE, "5 MB"),
    (int(2.5 * 1024 * 1024), "2.5 MB"),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected
