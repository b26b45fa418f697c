from unittest.mock import MagicMock

import pytest

from app.decoder.decoder import DOCX_MEDIA_TYPE, MIN_PDF_BYTES, Decoder
from app.decoder.exceptions import DecodeError, UnreadableDocument, UnsupportedMediaType
from app.decoder.pdfplumber_adapter import PdfPlumberAdapter


@pytest.fixture()
def decoder() -> Decoder:
    return Decoder(pdf_extractor=PdfPlumberAdapter())


class TestDecoderDispatch:
    def test_plain_text_by_media_type(self, decoder: Decoder) -> None:
        assert decoder.decode(b"Name: A", "text/plain", "resume.bin") == "Name: A"

    def test_plain_text_by_extension(self, decoder: Decoder) -> None:
        assert decoder.decode(b"Name: A", "", "resume.TXT") == "Name: A"

    def test_plain_text_with_charset_parameter(self, decoder: Decoder) -> None:
        assert decoder.decode(b"caf\xc3\xa9", "text/plain; charset=utf-8", None) == "café"

    def test_invalid_utf8_is_replaced(self, decoder: Decoder) -> None:
        assert decoder.decode(b"a\xffb", "text/plain", None) == "a�b"

    def test_pdf(self, decoder: Decoder, sample_pdf_bytes: bytes) -> None:
        result = decoder.decode(sample_pdf_bytes, "application/pdf", "cv.pdf")
        assert "Hello PDF World" in result

    def test_pdf_by_extension_only(self, decoder: Decoder, sample_pdf_bytes: bytes) -> None:
        result = decoder.decode(sample_pdf_bytes, "application/octet-stream", "cv.pdf")
        assert "Hello PDF World" in result

    def test_docx(self, decoder: Decoder, sample_docx_bytes: bytes) -> None:
        result = decoder.decode(sample_docx_bytes, DOCX_MEDIA_TYPE, "cv.docx")
        assert "Name: Ada Lovelace" in result

    def test_text_checked_before_pdf(self) -> None:
        pdf_extractor = MagicMock()
        result = Decoder(pdf_extractor=pdf_extractor).decode(b"notes", "text/plain", "cv.pdf")
        assert result == "notes"
        pdf_extractor.extract.assert_not_called()


class TestDecoderErrors:
    def test_undersized_pdf_is_unreadable(self) -> None:
        pdf_extractor = MagicMock()
        with pytest.raises(UnreadableDocument, match="too small"):
            Decoder(pdf_extractor=pdf_extractor).decode(
                b"%PDF" + b"x" * (MIN_PDF_BYTES - 5), "application/pdf", "cv.pdf"
            )
        pdf_extractor.extract.assert_not_called()

    def test_corrupt_pdf_is_unreadable(self, decoder: Decoder) -> None:
        with pytest.raises(UnreadableDocument):
            decoder.decode(b"%PDF-1.4\n" + b"broken " * 40, "application/pdf", "cv.pdf")

    @pytest.mark.parametrize(
        ("content_type", "file_name"),
        [("image/png", "photo.png"), ("application/msword", "old.doc"), ("", None)],
    )
    def test_unsupported_types(
        self, decoder: Decoder, content_type: str, file_name: str | None
    ) -> None:
        with pytest.raises(UnsupportedMediaType, match="Use PDF, DOCX, or TXT"):
            decoder.decode(b"data", content_type, file_name)

    def test_errors_share_decode_error_base(self) -> None:
        assert issubclass(UnsupportedMediaType, DecodeError)
        assert issubclass(UnreadableDocument, DecodeError)
