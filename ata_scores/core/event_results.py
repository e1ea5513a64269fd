"""Standings and scorecards built from a parsed data file."""

from .models import AtaDataFile, Event, Score, Shooter


def event_label(event: Event) -> str:
    """Format an event as 'MM/DD/YYYY : targets Kind'."""
    d = event.date
    kind = event.kind.title if event.kind is not None else ''
    return f"{d[0:2]}/{d[2:4]}/{d[4:8]} : {event.targets} {kind}"


def score_label(score: Score) -> str:
    """'hit/shot_at', plus yardage when one was recorded (e.g. '23/25 27.0 yd')."""
    text = f"{score.hit}/{score.shot_at}"
    if score.yardage > 0:
        text += f" {score.yardage:.1f} yd"
    return text


def event_summary(data: AtaDataFile) -> str:
    return f"{data.event_count} events and {len(data.shooters)} shooters loaded."


def event_standings(data: AtaDataFile, event_index: int) -> list[tuple[int, Shooter]]:
    """Shooters who shot an event, best hit count first.

    Shooters with equal hits keep their file order.

    Raises:
        IndexError: event_index is not one of the header's events.
    """
    if not 0 <= event_index < data.event_count:
        raise IndexError(f"No event at index {event_index}")

    standings = []
    for shooter in data.shooters:
        score = shooter.scores[event_index]
        if not score.entered:
            continue
        standings.append((score.hit, shooter))

    # sort() is stable
    standings.sort(key=lambda s: -s[0])
    return standings


def shooter_scorecard(data: AtaDataFile, shooter: Shooter) -> list[tuple[Event, Score]]:
    """(event, score) for each real event the shooter entered.

    Score slots past the header's event count are ignored.
    """
    card = []
    for event, score in zip(data.header.events, shooter.scores):
        if score.entered:
            card.append((event, score))
    return card
