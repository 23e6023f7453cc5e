"""Common literal values used across paged_embed.

These constants keep the navigation controls, colour fallback, and footer
label format centralized so the page builder, session, and tests import the
same values without drifting.

Examples
--------
>>> from paged_embed import _constants
>>> _constants.PAGE_LABEL_TEMPLATE.format(current=2, total=3)
'Page 2 of 3'
>>> _constants.NEXT in _constants.NAVIGATION_CONTROLS
True
"""

PREVIOUS = "⏪"
NEXT = "⏩"
NAVIGATION_CONTROLS = (PREVIOUS, NEXT)

DEFAULT_COLOUR = "#000000"
PAGE_LABEL_TEMPLATE = "Page {current} of {total}"
PAGE_LABEL_TOKEN = "{{ page }}"
DEFAULT_QUEUE_SIZE = 32
