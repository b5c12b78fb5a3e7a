"""
Unified design system for the schedule PDF so every page looks the same.
"""
from reportlab.lib.colors import Color
from reportlab.lib.units import mm

COLORS = {
    'text': Color(0, 0, 0),
    'border': Color(0, 0, 0),
    'header_fill': Color(240 / 255, 240 / 255, 240 / 255),
    'stripe_fill': Color(250 / 255, 250 / 255, 250 / 255),
}

FONTS = {
    'title': 'Helvetica-Bold',
    'table_header': 'Helvetica-Bold',
    'table_body': 'Helvetica',
    'ellipsis': 'Helvetica-Oblique',
    'note_label': 'Helvetica-Bold',
    'note_body': 'Helvetica-Oblique',
}

FONT_SIZES = {
    'title': 20,
    'table_header': 12,
    'table_body': 9,
    'note_label': 12,
    'note_body': 10,
}

# Offsets in millimetres, measured from the top of the page or table
LAYOUT = {
    'title_y': 20,
    'header_text_y': 8,
    'date_text_x': 4,
    'date_text_padding': 8,
    'stripe_inset': 1,
    'stripe_offset': 3,
    'note_offset_from_bottom': 40,
    'note_line_gap': 6,
    'note_leading': 5,
    'line_widths': {
        'border': 0.5,
        'separator': 0.3,
    },
}


def to_points(value_mm):
    """Convert millimetres to PDF points."""
    return value_mm * mm


def set_font(c, font_key, size_key=None):
    """Apply a design-system font to a ReportLab canvas."""
    c.setFont(FONTS[font_key], FONT_SIZES[size_key or font_key])
