from __future__ import annotations

import logging
from io import BytesIO

from pypdf import PdfReader

from app.core.errors import UpstreamError

logger = logging.getLogger(__name__)


def extract_pdf_text(content: bytes) -> str:
    """Join every text item of the PDF, in document order, each followed by a space."""
    parts: list[str] = []

    def _visit(text, cm, tm, font_dict, font_size):
        if text:
            parts.append(text + " ")

    try:
        reader = PdfReader(BytesIO(content))
        for page in reader.pages:
            page.extract_text(visitor_text=_visit)
    except Exception as exc:
        logger.warning("pdf_parse_failed bytes=%s: %s", len(content), exc)
        raise UpstreamError("PDF parsing failed") from exc

    return "".join(parts)
