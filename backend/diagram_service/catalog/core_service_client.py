import logging
from typing import List

import requests
from pydantic import TypeAdapter

from diagram_service.catalog.base import RecordSource
from diagram_service.ir.records import SystemRecord

logger = logging.getLogger(__name__)

SYSTEM_DEPENDENCIES_PATH = "/api/v1/solution-review/system-dependencies"

_RECORDS = TypeAdapter(List[SystemRecord])


def parse_records(payload) -> List[SystemRecord]:
    if payload is None:
        return []
    return _RECORDS.validate_python(payload)


class CoreServiceClient(RecordSource):
    """Read-only client for the core service's system-dependency catalog."""

    def __init__(self, base_url: str, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_all_system_records(self) -> List[SystemRecord]:
        url = f"{self.base_url}{SYSTEM_DEPENDENCIES_PATH}"
        logger.info("Calling core service for system dependencies: %s", url)

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        records = parse_records(response.json())
        logger.info("Retrieved %d system dependencies", len(records))
        return records
