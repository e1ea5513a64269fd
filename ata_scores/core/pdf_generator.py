"""Results sheet PDF generator for a parsed results file.

Generates one section per event with:
- Small-caps title and club line
- Red divider lines around the letter-spaced event label
- Ranked hit / shot-at / name rows, continued on new pages when long
- Page footer with the club number and page count
"""

import fitz  # PyMuPDF

from .event_results import event_label, event_standings
from .models import AtaDataFile, strip_padding

# --- Page layout constants (letter: 612 x 792 pt) ---
PAGE_W = 612
PAGE_H = 792

LEFT_MARGIN = 72
RIGHT_MARGIN = PAGE_W - 72
HIT_RIGHT_X = 130      # Hit counts are right-aligned on this x
SHOT_AT_X = 138
NAME_X = 190

# Colors
RED = (1, 0, 0)
BLACK = (0, 0, 0)

# Layout Y positions
TITLE_LINE1_Y = 45
TITLE_LINE2_Y = 70
DIVIDER_Y = 105
COUNT_Y = 125
ROWS_START_Y = 148
FOOTER_Y = PAGE_H - 20
ROWS_BOTTOM_Y = PAGE_H - 45

# Font sizes
TITLE1_LARGE = 18
TITLE1_SMALL = 13
TITLE2_SIZE = 11
DIVIDER_SIZE = 10
ROW_SIZE = 10
FOOTER_SIZE = 7

LINE_HEIGHT_RATIO = 1.4

FONT_REGULAR = 'Times-Roman'
FONT_BOLD = 'Times-Bold'


def generate_results_pdf(data: AtaDataFile, output_path: str,
                         title: str | None = None):
    """Generate the event results PDF.

    Args:
        data: Parsed data file.
        output_path: Where to save the PDF.
        title: Title for the top of each page (default 'Shoot Results').
    """
    club = strip_padding(data.header.club_number)
    title = title or 'Shoot Results'

    doc = fitz.open()
    if not data.header.events:
        doc.new_page(width=PAGE_W, height=PAGE_H)
        doc.save(output_path)
        doc.close()
        return

    line_height = ROW_SIZE * LINE_HEIGHT_RATIO

    for index, event in enumerate(data.header.events):
        label = event_label(event)
        standings = event_standings(data, index)

        page = _new_section_page(doc, title, club, label)
        _draw_text(page, LEFT_MARGIN, COUNT_Y, f'{len(standings)} shooters',
                   FONT_BOLD, ROW_SIZE)

        y = ROWS_START_Y
        for hit, shooter in standings:
            if y > ROWS_BOTTOM_Y:
                page = _new_section_page(doc, title, club, f'{label} (cont.)')
                y = ROWS_START_Y
            _draw_row(page, y, hit, shooter.scores[index].shot_at,
                      shooter.display_name)
            y += line_height

    page_count = doc.page_count
    for page_num in range(page_count):
        _draw_footer(doc[page_num], club, page_num + 1, page_count)

    doc.save(output_path)
    doc.close()


def _new_section_page(doc, title, club, divider_text):
    """Start a page with the title block and an event divider."""
    page = doc.new_page(width=PAGE_W, height=PAGE_H)
    _draw_small_caps(page, PAGE_W / 2, TITLE_LINE1_Y, title,
                     TITLE1_LARGE, TITLE1_SMALL)
    _draw_centered(page, TITLE_LINE2_Y, f'Club Number {club}',
                   FONT_REGULAR, TITLE2_SIZE)
    _draw_divider(page, DIVIDER_Y, divider_text)
    return page


# --- Drawing functions ---

def _draw_text(page, x, y, text, fontname, fontsize, color=BLACK):
    page.insert_text(fitz.Point(x, y), text,
                     fontname=fontname, fontsize=fontsize, color=color)


def _draw_centered(page, y, text, fontname, fontsize, color=BLACK):
    tw = fitz.get_text_length(text, fontname=fontname, fontsize=fontsize)
    _draw_text(page, PAGE_W / 2 - tw / 2, y, text, fontname, fontsize, color)


def _draw_small_caps(page, center_x, y, text, large_size, small_size):
    """Draw text in small caps, centered horizontally.

    First letter of each word at large_size, rest at small_size.
    All characters rendered uppercase.
    """
    total_width = _measure_small_caps_width(text, large_size, small_size)
    x = center_x - total_width / 2

    words = text.split()
    for wi, word in enumerate(words):
        if wi > 0:
            x += fitz.get_text_length(' ', fontname=FONT_BOLD, fontsize=large_size)

        for ci, ch in enumerate(word):
            ch_upper = ch.upper()
            fs = large_size if ci == 0 else small_size
            _draw_text(page, x, y, ch_upper, FONT_BOLD, fs)
            x += fitz.get_text_length(ch_upper, fontname=FONT_BOLD, fontsize=fs)


def _measure_small_caps_width(text, large_size, small_size):
    """Measure total width of small-caps text."""
    total = 0
    words = text.split()
    for wi, word in enumerate(words):
        if wi > 0:
            total += fitz.get_text_length(' ', fontname=FONT_BOLD, fontsize=large_size)
        for ci, ch in enumerate(word):
            ch_upper = ch.upper()
            fs = large_size if ci == 0 else small_size
            total += fitz.get_text_length(ch_upper, fontname=FONT_BOLD, fontsize=fs)
    return total


def _draw_divider(page, y, text):
    """Draw red lines flanking the letter-spaced event text."""
    spaced = _space_text(text.upper())
    tw = fitz.get_text_length(spaced, fontname=FONT_BOLD, fontsize=DIVIDER_SIZE)

    text_x = PAGE_W / 2 - tw / 2
    _draw_text(page, text_x, y, spaced, FONT_BOLD, DIVIDER_SIZE, RED)

    line_y = y - DIVIDER_SIZE * 0.35
    gap = 8
    page.draw_line(fitz.Point(LEFT_MARGIN - 32, line_y),
                   fitz.Point(text_x - gap, line_y),
                   color=RED, width=0.75)
    page.draw_line(fitz.Point(text_x + tw + gap, line_y),
                   fitz.Point(RIGHT_MARGIN + 32, line_y),
                   color=RED, width=0.75)


def _space_text(text):
    """Add letter spacing: 'S 100' -> 'S  1 0 0'."""
    words = text.split()
    spaced_words = [' '.join(list(word)) for word in words]
    return '  '.join(spaced_words)


def _draw_row(page, y, hit, shot_at, name):
    """Draw one standings row: right-aligned hits, '/ shot_at', name."""
    hit_text = str(hit)
    tw = fitz.get_text_length(hit_text, fontname=FONT_BOLD, fontsize=ROW_SIZE)
    _draw_text(page, HIT_RIGHT_X - tw, y, hit_text, FONT_BOLD, ROW_SIZE)
    _draw_text(page, SHOT_AT_X, y, f'/ {shot_at}', FONT_REGULAR, ROW_SIZE)
    _draw_text(page, NAME_X, y, name, FONT_REGULAR, ROW_SIZE)


def _draw_footer(page, club, page_num, page_count):
    text = f'Club {club}  -  Page {page_num} of {page_count}'
    _draw_centered(page, FOOTER_Y, text, FONT_REGULAR, FOOTER_SIZE)
