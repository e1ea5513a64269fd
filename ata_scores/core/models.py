"""Data models for the ATA trapshooting results file."""

from dataclasses import dataclass
from enum import Enum


SLOT_COUNT = 24  # Event slots in the header, score slots per shooter


class FormatError(ValueError):
    """Raised when a line does not have the expected length or terminator."""

    def __init__(self, message: str = 'Unexpected file format!'):
        super().__init__(message)


class EventKind(Enum):
    SINGLES = 'S'
    DOUBLES = 'D'
    HANDICAP = 'H'

    @property
    def title(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Event:
    """One event slot from the header line."""
    date: str                       # "05112024" (MMDDYYYY, not validated)
    kind: EventKind | None = None   # None marks an empty slot
    targets: int = 0                # Targets thrown, 0-999


@dataclass(frozen=True)
class Header:
    club_number: str                # 6 chars, verbatim
    events: tuple = ()              # Contiguous prefix of real events


@dataclass(frozen=True)
class Score:
    hit: int = 0
    shot_at: int = 0                # 0 = did not shoot this event
    yardage: float = 0.0            # 0 = not recorded

    @property
    def entered(self) -> bool:
        return self.shot_at != 0


@dataclass(frozen=True)
class Shooter:
    """One shooter line. Text fields are kept exactly as they appear in the file."""
    ata_number: str                 # 7 chars, may hold new-member letters
    name: str                       # 18
    address: str                    # 25
    city: str                       # 18
    state: str                      # 2
    postal_code: str                # 5
    classification: str             # 1
    scores: tuple = ()              # Always SLOT_COUNT scores

    @property
    def display_name(self) -> str:
        return strip_padding(self.name)


@dataclass(frozen=True)
class AtaDataFile:
    """Parsed contents of a whole data file."""
    header: Header
    shooters: tuple = ()
    trailing_bytes: int = 0         # Size of a discarded short final read

    @property
    def event_count(self) -> int:
        return len(self.header.events)


@dataclass
class ReportConfig:
    """Output options for a viewing session."""
    data_path: str
    title: str = ''                 # PDF title, '' for the default
    results_path: str | None = None
    csv_path: str | None = None
    pdf_path: str | None = None
    interactive: bool = True


def strip_padding(text: str) -> str:
    """Strip the blank/NUL padding used by fixed-width fields."""
    return text.rstrip(' \x00')
