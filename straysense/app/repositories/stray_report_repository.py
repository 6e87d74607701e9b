from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from straysense.domain.entities import ReportStatus, StrayReport


class IStrayReportRepository(ABC):
    """Stray report repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, report_id: int) -> Optional[StrayReport]:
        """Get report by ID"""
        pass

    @abstractmethod
    async def create(self, report: StrayReport) -> StrayReport:
        """Create a new report"""
        pass

    @abstractmethod
    async def update(self, report: StrayReport) -> StrayReport:
        """Update existing report"""
        pass

    @abstractmethod
    async def list_with_reporters(self) -> List[Tuple[StrayReport, str, str]]:
        """List reports with reporter first/last name, newest first"""
        pass

    @abstractmethod
    async def count_by_status(self, status: ReportStatus) -> int:
        """Count reports in a given status"""
        pass

    @abstractmethod
    async def unlink_animal(self, animal_id: int) -> int:
        """Clear processed_animal_id on reports promoted to an animal"""
        pass
