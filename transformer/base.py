"""Abstract base class for timetable transformers."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Mapping

from timetable import Timetable


class BaseTransformer(ABC):
    """Abstract base class defining the interface for timetable transformers.

    Extend this class to export busy timetables to other formats
    (e.g., iCalendar, CSV, a calendar API).
    """

    @abstractmethod
    def transform(
        self,
        timetables: Mapping[str, Timetable],
        start_date: date,
        end_date: date
    ) -> Any:
        """Transform busy timetables into the target format.

        Args:
            timetables: Timetables keyed by the name of their owner.
            start_date: First day the weekly periods repeat on.
            end_date: Last day the weekly periods repeat on.

        Returns:
            Transformed data in the target format.
        """
        pass

    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.

        Args:
            output_path: Path to the output file.
        """
        pass
