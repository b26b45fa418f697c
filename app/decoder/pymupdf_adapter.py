import pymupdf

from app.decoder.base import BaseTextExtractor
from app.decoder.benign_warnings import is_benign
from app.decoder.exceptions import UnreadableDocument
from app.decoder.pdfplumber_adapter import UNREADABLE_PDF_MESSAGE
from app.logging.logger import Log


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass or doc.page_count == 0:
                    raise UnreadableDocument(UNREADABLE_PDF_MESSAGE)
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except UnreadableDocument:
            raise
        except Exception as exc:
            Log.warning(f"pymupdf extraction failed: {exc}")
            raise UnreadableDocument(UNREADABLE_PDF_MESSAGE) from exc
        finally:
            self._drain_warnings()

    @staticmethod
    def _drain_warnings() -> None:
        messages = pymupdf.TOOLS.mupdf_warnings(reset=True) or ""
        for line in messages.splitlines():
            if line and not is_benign(line):
                Log.warning(f"MuPDF: {line}")
