import logging
from typing import Any, Dict, Optional

import requests

from .prompts import SYSTEM_INSTRUCTION, USER_PROMPT, JOB_DESCRIPTION_TEMPLATE, RESUME_TEMPLATE

logger = logging.getLogger(__name__)


def build_payload(job_text: str, resume_text: str) -> Dict[str, Any]:
    """Gemini generateContent request body: prompt, JD and resume as three text parts."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": USER_PROMPT},
                    {"text": JOB_DESCRIPTION_TEMPLATE.format(jd=job_text)},
                    {"text": RESUME_TEMPLATE.format(resume=resume_text)},
                ],
            }
        ],
        "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
    }


def query_gemini(
    job_text: str,
    resume_text: str,
    api_url: str,
    api_key: str,
    timeout: Optional[float] = None,
) -> Optional[Dict[str, Any]]:
    """
    Send one evaluation request to Gemini.

    Returns the decoded JSON body, or None when the service could not be reached,
    answered with a non-2xx status or sent something that is not JSON.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": api_key,
    }
    payload = build_payload(job_text, resume_text)

    try:
        response = requests.post(api_url, headers=headers, json=payload, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as e:
        body = e.response.text if e.response is not None else ""
        logger.error("Gemini API request failed: %s\n%s", e, body)
    except requests.exceptions.RequestException as e:
        logger.error("Error communicating with Gemini AI: %s", e)
    except ValueError as e:
        logger.error("Gemini API returned a non-JSON body: %s", e)
    return None


def extract_reply_text(response: Any) -> Optional[str]:
    """Text of the first part of the first candidate, or None if that path is absent."""
    try:
        text = response["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text
