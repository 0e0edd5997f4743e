from abc import ABC, abstractmethod
from typing import List

from diagram_service.ir.records import SystemRecord


class RecordSource(ABC):
    @abstractmethod
    def fetch_all_system_records(self) -> List[SystemRecord]:
        """Return the full snapshot of system records"""
        pass
