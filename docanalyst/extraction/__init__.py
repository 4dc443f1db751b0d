from docanalyst.extraction.dispatcher import ExtractionDispatcher, file_extension
from docanalyst.extraction.factory import ExtractionDispatcherFactory

__all__ = ["ExtractionDispatcher", "ExtractionDispatcherFactory", "file_extension"]
