from diagram_service.catalog.base import RecordSource
from diagram_service.catalog.core_service_client import CoreServiceClient
from diagram_service.catalog.file_source import FileRecordSource
from diagram_service.catalog.config import get_record_source

__all__ = [
    "RecordSource",
    "CoreServiceClient",
    "FileRecordSource",
    "get_record_source",
]
