import io

import pdfplumber

from app.decoder.base import BaseTextExtractor
from app.decoder.benign_warnings import suppress_benign_warnings
from app.decoder.exceptions import UnreadableDocument
from app.logging.logger import Log

UNREADABLE_PDF_MESSAGE = (
    "Could not read PDF (file may be corrupted or password-protected). "
    "Try re-saving the PDF or paste the text instead."
)


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, data: bytes) -> str:
        try:
            with suppress_benign_warnings():
                with pdfplumber.open(io.BytesIO(data)) as pdf:
                    if not pdf.pages:
                        raise UnreadableDocument(UNREADABLE_PDF_MESSAGE)
                    pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except UnreadableDocument:
            raise
        except Exception as exc:
            Log.warning(f"pdfplumber extraction failed: {exc}")
            raise UnreadableDocument(UNREADABLE_PDF_MESSAGE) from exc
