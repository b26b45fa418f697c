"""Turns an uploaded document buffer into plain text."""

from pathlib import Path

from app.decoder.base import BaseTextExtractor
from app.decoder.docx_adapter import DocxAdapter
from app.decoder.exceptions import UnreadableDocument, UnsupportedMediaType
from app.decoder.text_adapter import PlainTextAdapter

TEXT_MEDIA_TYPE = "text/plain"
PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

MIN_PDF_BYTES = 100


class Decoder:
    """Dispatches a buffer to the extractor matching its media type or extension.

    Plain text is checked first, then PDF, then DOCX. Each buffer is handed to
    exactly one extractor, once.
    """

    def __init__(
        self,
        pdf_extractor: BaseTextExtractor,
        docx_extractor: BaseTextExtractor | None = None,
        text_extractor: BaseTextExtractor | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._docx_extractor = docx_extractor or DocxAdapter()
        self._text_extractor = text_extractor or PlainTextAdapter()

    def decode(self, data: bytes, content_type: str | None, file_name: str | None) -> str:
        """Extract plain text from a document.

        Raises:
            UnsupportedMediaType: if the type is not text, PDF or DOCX.
            UnreadableDocument: if a PDF/DOCX buffer cannot be parsed.
        """
        media_type = (content_type or "").split(";")[0].strip().lower()
        extension = Path(file_name or "").suffix.lower()

        if media_type == TEXT_MEDIA_TYPE or extension == ".txt":
            return self._text_extractor.extract(data)

        if media_type == PDF_MEDIA_TYPE or extension == ".pdf":
            if len(data) < MIN_PDF_BYTES:
                raise UnreadableDocument(
                    "PDF file is too small or empty. Please upload a valid PDF."
                )
            return self._pdf_extractor.extract(data)

        if media_type == DOCX_MEDIA_TYPE or extension == ".docx":
            return self._docx_extractor.extract(data)

        raise UnsupportedMediaType("Unsupported file type. Use PDF, DOCX, or TXT.")
