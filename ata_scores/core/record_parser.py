"""Build records from fixed-offset byte windows.

Header line layout (318 bytes + CRLF):
    club_number(6) + 24 x [date(8) type(1) sep(1) targets(3)]

Shooter line layout (316 bytes + CRLF):
    ata_number(7) name(18) address(25) city(18) state(2) postal_code(5)
    classification(1) + 24 x [hit(3) shot_at(3) yardage(4)]
"""

from .field_decoder import decode_count, decode_float, decode_text
from .models import SLOT_COUNT, Event, EventKind, Header, Score, Shooter


CLUB_NUMBER_WIDTH = 6
EVENT_WIDTH = 13
SCORE_WIDTH = 10

# (field, offset, width) for the identity part of a shooter line
SHOOTER_FIELDS = [
    ('ata_number', 0, 7),
    ('name', 7, 18),
    ('address', 25, 25),
    ('city', 50, 18),
    ('state', 68, 2),
    ('postal_code', 70, 5),
    ('classification', 75, 1),
]
SCORES_OFFSET = 76

HEADER_PAYLOAD = CLUB_NUMBER_WIDTH + SLOT_COUNT * EVENT_WIDTH    # 318
SHOOTER_PAYLOAD = SCORES_OFFSET + SLOT_COUNT * SCORE_WIDTH       # 316

_KINDS = {kind.value.encode('ascii'): kind for kind in EventKind}


def parse_event(window: bytes) -> Event:
    """Parse a 13-byte event window.

    Unknown type tags give kind=None with targets left at 0. The date is
    copied either way.
    """
    date = decode_text(window[0:8], 8)
    kind = _KINDS.get(bytes(window[8:9]))
    if kind is None:
        return Event(date=date)
    # window[9] is a separator
    return Event(date=date, kind=kind, targets=decode_count(window[10:13]))


def parse_event_slots(line: bytes) -> list[Event]:
    """Parse all 24 event slots of a header line, empty ones included."""
    events = []
    for i in range(SLOT_COUNT):
        start = CLUB_NUMBER_WIDTH + i * EVENT_WIDTH
        events.append(parse_event(line[start:start + EVENT_WIDTH]))
    return events


def parse_header(line: bytes) -> Header:
    """Parse the header line. Only the run of events before the first empty slot is kept."""
    events = []
    for event in parse_event_slots(line):
        if event.kind is None:
            break
        events.append(event)

    return Header(
        club_number=decode_text(line[0:CLUB_NUMBER_WIDTH], CLUB_NUMBER_WIDTH),
        events=tuple(events),
    )


def parse_score(window: bytes) -> Score:
    return Score(
        hit=decode_count(window[0:3]),
        shot_at=decode_count(window[3:6]),
        yardage=decode_float(window[6:10]),
    )


def parse_shooter(line: bytes) -> Shooter:
    """Parse a shooter line (terminator excluded).

    Every line carries all 24 score slots no matter how many events the
    header declares.
    """
    fields = {}
    for name, offset, width in SHOOTER_FIELDS:
        fields[name] = decode_text(line[offset:offset + width], width)

    scores = []
    for i in range(SLOT_COUNT):
        start = SCORES_OFFSET + i * SCORE_WIDTH
        scores.append(parse_score(line[start:start + SCORE_WIDTH]))

    return Shooter(scores=tuple(scores), **fields)
