"""
Resume evaluation: how well a candidate's resume matches a job description.

Both PDFs are reduced to text, sent to Gemini in a single request and the reply
is normalized into an EvaluatorResult. Every outcome, including failures, comes
back as an AnalysisResponse; nothing is raised to the caller.
"""
import logging

from config import Settings
from schemas import AnalysisResponse
from parsers.pdf import PDFSource, PDFExtractionError, pdf_to_text
from .llm_gemini import query_gemini, extract_reply_text
from .normalizer import MalformedReplyError, IncompleteReplyError, parse_evaluation

logger = logging.getLogger(__name__)

MSG_SUCCESS = "Resume successfully analyzed! Check the results below."
MSG_PDF_FAILED = "Failed to read PDF content. Please ensure the files are valid PDFs and try again."
MSG_UNAVAILABLE = "AI service is currently unavailable. Please try again later."
MSG_EMPTY = "AI service returned an empty response. Please try again."
MSG_MALFORMED = (
    "Failed to process AI analysis. The AI response may be malformed or contain unexpected formatting."
)
MSG_INCOMPLETE = "AI returned incomplete analysis. Please try again."
MSG_UNEXPECTED = "An unexpected error occurred during analysis. Please try again."


def _failure(message: str) -> AnalysisResponse:
    return AnalysisResponse(ok=False, message=message, result=None)


def evaluate(jd: PDFSource, cv: PDFSource, settings: Settings) -> AnalysisResponse:
    """
    Args:
        jd: job description PDF (bytes, path or file-like)
        cv: candidate's resume PDF
        settings: Gemini endpoint, key and timeout
    """
    try:
        job_text = pdf_to_text(jd)
        resume_text = pdf_to_text(cv)

        response = query_gemini(
            job_text,
            resume_text,
            api_url=settings.gemini_api_url,
            api_key=settings.gemini_api_key,
            timeout=settings.gemini_timeout,
        )
        if response is None:
            return _failure(MSG_UNAVAILABLE)

        text = extract_reply_text(response)
        if not text:
            return _failure(MSG_EMPTY)

        result = parse_evaluation(text)
        return AnalysisResponse(ok=True, message=MSG_SUCCESS, result=result)

    except PDFExtractionError as e:
        logger.error("Error in evaluation process: %s", e)
        return _failure(MSG_PDF_FAILED)
    except MalformedReplyError as e:
        logger.error("Failed to parse AI response. Original error: %s", e)
        return _failure(MSG_MALFORMED)
    except IncompleteReplyError as e:
        logger.error("AI response incomplete: %s", e)
        return _failure(MSG_INCOMPLETE)
    except Exception:
        logger.exception("Unexpected error in evaluation process")
        return _failure(MSG_UNEXPECTED)
