#!/usr/bin/env python3
"""CLI entry point for browsing an ATA shoot results file.

Usage:
    python view_scores.py ATADATA.DAT
    python view_scores.py ATADATA.DAT --csv scores.csv --pdf results.pdf \\
        --title "2024 Spring Handicap" --no-interactive
"""

import argparse
import os
import re
import sys

# Add parent directory to path for imports when run as a script
if __package__ in (None, ''):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ata_scores.core.models import FormatError, ReportConfig, strip_padding
from ata_scores.core.event_results import (
    event_label, event_standings, event_summary, score_label, shooter_scorecard
)
from ata_scores.core.output_generator import generate_event_results, generate_scores_csv
from ata_scores.core.pdf_generator import generate_results_pdf
from ata_scores.adapters.ata_adapter import load


_SELECTION_RE = re.compile(r'^\s*([+-]?\d+)\s*$')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Browse an ATA shoot results file')
    parser.add_argument('data', help='Path to the ATA data file')
    parser.add_argument('--results', default=None,
                        help='Write every event\'s standings to this text file')
    parser.add_argument('--csv', default=None,
                        help='Write all entered scores to this CSV file')
    parser.add_argument('--pdf', default=None,
                        help='Write an event results PDF to this path')
    parser.add_argument('--title', default='',
                        help='Title printed at the top of each PDF page')
    parser.add_argument('--no-interactive', action='store_true',
                        help='Exit after loading and writing reports')

    args = parser.parse_args(argv)

    config = ReportConfig(
        data_path=args.data,
        title=args.title,
        results_path=args.results,
        csv_path=args.csv,
        pdf_path=args.pdf,
        interactive=not args.no_interactive,
    )

    try:
        data = load(config.data_path)
    except (FormatError, OSError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if data.trailing_bytes:
        print(f"Warning: ignored {data.trailing_bytes} bytes of incomplete "
              f"shooter line at end of file")

    if config.results_path:
        generate_event_results(data, config.results_path)
        print(f"Generated {config.results_path}")

    if config.csv_path:
        generate_scores_csv(data, config.csv_path)
        print(f"Generated {config.csv_path}")

    if config.pdf_path:
        generate_results_pdf(data, config.pdf_path, title=config.title or None)
        print(f"Generated {config.pdf_path}")

    if config.interactive:
        run_session(data)
    else:
        print(f"Club Number: {strip_padding(data.header.club_number)}")
        print(event_summary(data))

    return 0


def run_session(data, stdin=None, stdout=None):
    """Run the [P]rint / [V]iew / [Q]uit menu until Q or end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def say(text=''):
        print(text, file=stdout)

    say(f"Club Number: {strip_padding(data.header.club_number)}")
    say(event_summary(data))

    while True:
        say("[P]rint Scores, [V]iew Shooter Info, [Q]uit")
        command = _prompt(stdin, stdout, "Command: ")
        if command is None:
            return

        choice = command[:1].upper()
        if choice == 'P':
            if not _print_scores(data, stdin, stdout):
                return
        elif choice == 'V':
            if not _view_shooter_info(data, stdin, stdout):
                return
        elif choice == 'Q':
            return
        else:
            say("Unknown command!")


def _print_scores(data, stdin, stdout) -> bool:
    """Prompt for an event and print its standings. False at end of input."""
    if not data.event_count:
        print("No events in this file.", file=stdout)
        return True

    def list_events():
        for i, event in enumerate(data.header.events):
            print(f"\t[{i}] {event_label(event)}", file=stdout)
        print("Which event?", file=stdout)

    index = _select(stdin, stdout, list_events, "Event #: ",
                    data.event_count, "Invalid event selected!")
    if index is None:
        return False

    print(event_label(data.header.events[index]), file=stdout)
    standings = event_standings(data, index)
    print(f"{len(standings)} shooters", file=stdout)
    for hit, shooter in standings:
        print(f"{hit:3d} {shooter.display_name}", file=stdout)
    print(file=stdout)
    return True


def _view_shooter_info(data, stdin, stdout) -> bool:
    """Prompt for a shooter and print their details. False at end of input."""
    if not data.shooters:
        print("No shooters in this file.", file=stdout)
        return True

    def list_shooters():
        for i, shooter in enumerate(data.shooters):
            print(f"\t[{i}] {shooter.display_name}", file=stdout)
        print("Which shooter?", file=stdout)

    index = _select(stdin, stdout, list_shooters, "Shooter #: ",
                    len(data.shooters), "Invalid shooter selected!")
    if index is None:
        return False

    s = data.shooters[index]
    print(s.display_name, file=stdout)
    print(f"ATA Number: {strip_padding(s.ata_number)}", file=stdout)
    print(f"Address: {strip_padding(s.address)}, {strip_padding(s.city)}, "
          f"{strip_padding(s.state)} {strip_padding(s.postal_code)}", file=stdout)
    print("Scores: ", file=stdout)
    for event, score in shooter_scorecard(data, s):
        print(f"\t{event_label(event)}   {score_label(score)}", file=stdout)
    return True


def _select(stdin, stdout, show_choices, prompt, count, invalid_message):
    """Ask until the answer is an index in [0, count). None at end of input."""
    while True:
        show_choices()
        answer = _prompt(stdin, stdout, prompt)
        if answer is None:
            return None

        m = _SELECTION_RE.match(answer)
        if m and 0 <= int(m.group(1)) < count:
            return int(m.group(1))
        print(invalid_message, file=stdout)


def _prompt(stdin, stdout, text):
    """Print a prompt and read one line. None at end of input."""
    print(text, end='', file=stdout)
    stdout.flush()
    line = stdin.readline()
    if not line:
        print(file=stdout)
        return None
    return line.rstrip('\r\n')


if __name__ == '__main__':
    sys.exit(main())
