from app.config.settings import Settings
from app.decoder.base import BaseTextExtractor
from app.decoder.decoder import Decoder
from app.decoder.docx_adapter import DocxAdapter
from app.decoder.pdfplumber_adapter import PdfPlumberAdapter
from app.decoder.pymupdf_adapter import PyMuPdfAdapter
from app.decoder.text_adapter import PlainTextAdapter


class DecoderFactory:
    """Builds the Decoder with one extractor per accepted document family.

    Only the PDF engine is configurable; DOCX and plain text each have a
    single extractor.
    """

    PDF_ENGINES: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()

    @classmethod
    def create(cls, settings: Settings) -> Decoder:
        return Decoder(
            pdf_extractor=cls.create_pdf_extractor(settings),
            docx_extractor=DocxAdapter(),
            text_extractor=PlainTextAdapter(),
        )
