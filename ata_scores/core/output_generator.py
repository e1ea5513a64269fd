"""Text and CSV report generators for a parsed results file.

Generates two output types from the dataset:
  - Event results text (one ruled section per event, best score first)
  - Scores CSV with one row per shooter per event entered
"""

import csv

from .event_results import event_label, event_standings
from .models import AtaDataFile, strip_padding


CSV_FIELDS = ['ata_number', 'name', 'state', 'classification',
              'event', 'date', 'kind', 'targets',
              'hit', 'shot_at', 'yardage']


def generate_event_results(data: AtaDataFile, output_path: str):
    """Write every event's standings to a text file.

    Args:
        data: Parsed data file.
        output_path: Where to write the text report.
    """
    lines = [f'Club Number: {strip_padding(data.header.club_number)}']

    for index, event in enumerate(data.header.events):
        standings = event_standings(data, index)

        lines.append('')
        lines.append('=' * 60)
        lines.append(f'  [{index}] {event_label(event)}')
        lines.append('=' * 60)
        lines.append(f'{len(standings)} shooters')
        for hit, shooter in standings:
            lines.append(f'{hit:3d} {shooter.display_name}')

    with open(output_path, 'w') as f:
        f.write('\n'.join(lines) + '\n')


def generate_scores_csv(data: AtaDataFile, output_path: str):
    """Write a CSV of every score entered in a real event.

    Rows follow file order of shooters, then event order.
    """
    rows = []
    for shooter in data.shooters:
        for index, event in enumerate(data.header.events):
            score = shooter.scores[index]
            if not score.entered:
                continue
            rows.append({
                'ata_number': strip_padding(shooter.ata_number),
                'name': shooter.display_name,
                'state': strip_padding(shooter.state),
                'classification': strip_padding(shooter.classification),
                'event': index,
                'date': event.date,
                'kind': event.kind.title,
                'targets': event.targets,
                'hit': score.hit,
                'shot_at': score.shot_at,
                'yardage': f'{score.yardage:.1f}' if score.yardage > 0 else '',
            })

    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
