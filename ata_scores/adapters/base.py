"""Abstract base adapter for reading a results data file."""

from abc import ABC, abstractmethod

from ..core.models import AtaDataFile


class BaseAdapter(ABC):
    @abstractmethod
    def parse(self, data_path: str) -> AtaDataFile:
        """Read a data file and return the parsed dataset.

        Raises FormatError if the file structure is not recognised. No
        partial dataset is ever returned.
        """
        pass
