"""Adapter for ATA fixed-width results files (CRLF-terminated lines)."""

from .base import BaseAdapter
from ..core.models import AtaDataFile, FormatError
from ..core.record_parser import (
    HEADER_PAYLOAD, SHOOTER_PAYLOAD, parse_header, parse_shooter
)


LINE_TERMINATOR = b'\r\n'
HEADER_LINE_LENGTH = HEADER_PAYLOAD + len(LINE_TERMINATOR)    # 320
SHOOTER_LINE_LENGTH = SHOOTER_PAYLOAD + len(LINE_TERMINATOR)  # 318


class AtaAdapter(BaseAdapter):
    """Read the header line, then shooter lines until the input runs out.

    Any full-length line without a CRLF terminator is fatal for the whole
    file. A short read at the end stops the loop and is discarded; its size
    is kept in `trailing_bytes`.
    """

    def parse(self, data_path: str) -> AtaDataFile:
        with open(data_path, 'rb') as f:
            line = f.read(HEADER_LINE_LENGTH)
            self._check_line(line, HEADER_LINE_LENGTH)
            header = parse_header(line[:HEADER_PAYLOAD])

            shooters = []
            trailing_bytes = 0
            while True:
                line = f.read(SHOOTER_LINE_LENGTH)
                if len(line) < SHOOTER_LINE_LENGTH:
                    trailing_bytes = len(line)
                    break
                self._check_line(line, SHOOTER_LINE_LENGTH)
                shooters.append(parse_shooter(line[:SHOOTER_PAYLOAD]))

        return AtaDataFile(
            header=header,
            shooters=tuple(shooters),
            trailing_bytes=trailing_bytes,
        )

    @staticmethod
    def _check_line(line: bytes, length: int):
        if len(line) != length or line[-2:] != LINE_TERMINATOR:
            raise FormatError()


def load(data_path: str) -> AtaDataFile:
    """Load a data file. Raises FormatError for a malformed file."""
    return AtaAdapter().parse(data_path)
