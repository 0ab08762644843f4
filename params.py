from typing import Dict, Tuple


# Plot colors per candidate slot; 'T' is used for ties/no winner
COLORS = {
    'A': 'lime',
    'B': 'magenta',
    'T': 'yellow'
}

DEFAULT_CANDIDATES: Tuple[str, str] = ("Candidate A", "Candidate B")

# Margins closer than this are printed as EVEN
EVEN_MARGIN = 0.0001

# State-info table (delimited text)
STATE_INFO_HEADER_ROWS = 2
STATE_INFO_MIN_FIELDS = 15
STATE_INFO_ABBR_COL = 1
STATE_INFO_EV_COL = 14

# Vote-results workbook. Columns are positional, not looked up by header name.
RESULTS_SHEET = "Results"
RESULTS_HEADER_ROWS = 2
RESULTS_ABBR_COL = 1
RESULTS_B_COL = 3
RESULTS_A_COL = 4

# Counties table: accepted header spellings (lower-case), first match wins
COUNTY_HEADER_ALIASES: Dict[str, Tuple[str, ...]] = {
    "lat": ("lat", "latitude"),
    "lng": ("lng", "longitude"),
    "state": ("state_id", "state"),
    "a_votes": ("a_votes", "bb votes"),
    "b_votes": ("b_votes", "rr votes"),
}

# Background image extent (lon_min, lon_max, lat_min, lat_max) for the US map
MAP_EXTENT: Tuple[float, float, float, float] = (-125.0, -67.0, 20.0, 50.0)
MAP_POINT_SIZE = 6

# Hours between snapshots for the reporting timeline
TIMELINE_STEP_HOURS = 3
HOURS_PER_DAY = 24.0
