import io
import logging
from typing import BinaryIO, Union

import fitz  # PyMuPDF
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

PDFSource = Union[str, bytes, BinaryIO]


class PDFExtractionError(RuntimeError):
    pass


def _read_bytes(source: PDFSource) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, str):
        with open(source, "rb") as f:
            return f.read()
    # file-like object (FastAPI UploadFile.file, Streamlit uploads)
    return source.read()


def _extract_pymupdf(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text("text") for page in doc)


def _extract_pypdf2(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def pdf_to_text(source: PDFSource) -> str:
    """
    Extract text from a PDF.
    Works with raw bytes, file paths (str) and in-memory file-like objects.

    PyMuPDF first, PyPDF2 as a fallback. Raises PDFExtractionError when
    neither produces any text.
    """
    try:
        data = _read_bytes(source)
    except OSError as e:
        raise PDFExtractionError(f"Failed to extract text from PDF: {e}") from e

    last_error = "no text found"
    for name, extractor in (("PyMuPDF", _extract_pymupdf), ("PyPDF2", _extract_pypdf2)):
        try:
            text = extractor(data).strip()
        except Exception as e:
            logger.warning(f"[WARN] {name} extraction failed: {e}")
            last_error = str(e) or type(e).__name__
            continue
        if text:
            logger.info(f"[INFO] Extracted {len(text)} characters via {name}")
            return text

    logger.error(f"Error extracting text from PDF: {last_error}")
    raise PDFExtractionError(f"Failed to extract text from PDF: {last_error}")
