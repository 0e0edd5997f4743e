import json
from pathlib import Path
from typing import List

from diagram_service.catalog.base import RecordSource
from diagram_service.catalog.core_service_client import parse_records
from diagram_service.ir.records import SystemRecord


class FileRecordSource(RecordSource):
    """Serves a catalog snapshot saved as a JSON list, for offline work."""

    def __init__(self, path: str):
        self.path = Path(path)

    def fetch_all_system_records(self) -> List[SystemRecord]:
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        return parse_records(payload)
