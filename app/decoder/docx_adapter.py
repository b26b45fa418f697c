import io

from docx import Document

from app.decoder.base import BaseTextExtractor
from app.decoder.exceptions import UnreadableDocument
from app.logging.logger import Log


class DocxAdapter(BaseTextExtractor):
    """Extracts raw paragraph and table text from DOCX using python-docx."""

    def extract(self, data: bytes) -> str:
        try:
            document = Document(io.BytesIO(data))
        except Exception as exc:
            Log.warning(f"docx extraction failed: {exc}")
            raise UnreadableDocument(
                "Could not read DOCX (file may be corrupted). Try re-saving it."
            ) from exc

        lines = [paragraph.text for paragraph in document.paragraphs if paragraph.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(" | ".join(cells))
        return "\n".join(lines).strip()
