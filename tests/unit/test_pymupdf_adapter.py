from unittest.mock import patch

import pytest

from app.decoder.exceptions import UnreadableDocument
from app.decoder.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(sample_pdf_bytes)
        assert "Hello PDF World" in result

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(multi_page_pdf_bytes)
        assert result.index("Page one content") < result.index("Page two content")

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfAdapter().extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_corrupt_bytes(self) -> None:
        with pytest.raises(UnreadableDocument):
            PyMuPdfAdapter().extract(b"%PDF-1.4\n" + b"\x00garbage" * 40)

    def test_benign_mupdf_warnings_are_not_logged(self, sample_pdf_bytes: bytes) -> None:
        with (
            patch(
                "app.decoder.pymupdf_adapter.pymupdf.TOOLS.mupdf_warnings",
                return_value="FT: undefined function: 12\nreal problem here",
            ),
            patch("app.decoder.pymupdf_adapter.Log") as mock_log,
        ):
            PyMuPdfAdapter().extract(sample_pdf_bytes)
        mock_log.warning.assert_called_once_with("MuPDF: real problem here")
