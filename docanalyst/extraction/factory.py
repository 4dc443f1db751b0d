from docanalyst.config.settings import Settings
from docanalyst.extraction.base import BaseTextExtractor
from docanalyst.extraction.dispatcher import ExtractionDispatcher
from docanalyst.extraction.docx_adapter import DocxAdapter
from docanalyst.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docanalyst.extraction.plain_text_adapter import PlainTextAdapter
from docanalyst.extraction.pymupdf_adapter import PyMuPdfAdapter
from docanalyst.extraction.spreadsheet_adapter import XlsAdapter, XlsxAdapter


class ExtractionDispatcherFactory:
    """Creates an extraction dispatcher with the configured PDF engine."""

    PDF_ENGINES: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> ExtractionDispatcher:
        plain_text = PlainTextAdapter()
        return ExtractionDispatcher(
            {
                "pdf": cls.create_pdf_extractor(settings),
                "docx": DocxAdapter(),
                "txt": plain_text,
                "csv": plain_text,
                "xlsx": XlsxAdapter(),
                "xls": XlsAdapter(),
            }
        )

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
