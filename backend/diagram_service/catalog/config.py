from diagram_service import config
from diagram_service.catalog.base import RecordSource
from diagram_service.catalog.core_service_client import CoreServiceClient
from diagram_service.catalog.file_source import FileRecordSource


def get_record_source() -> RecordSource:
    if config.CATALOG_FILE:
        return FileRecordSource(config.CATALOG_FILE)

    return CoreServiceClient(
        base_url=config.CORE_SERVICE_URL,
        timeout=config.CORE_SERVICE_TIMEOUT,
    )
