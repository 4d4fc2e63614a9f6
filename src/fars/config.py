"""
Configuration constants for the FARS accident pipeline.
"""

from typing import List, Tuple

# ======================================================
#  DATASET FILES
# ======================================================
# One compressed CSV per year, resolved against the working directory.
FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"

# ======================================================
#  SCHEMA
# ======================================================
STATE_FIELD: str = "STATE"
MONTH_FIELD: str = "MONTH"
LONGITUDE_FIELD: str = "LONGITUD"
LATITUDE_FIELD: str = "LATITUDE"

# Injected at load time; not present in the raw files.
YEAR_FIELD: str = "year"

INTEGER_FIELDS: List[str] = [STATE_FIELD, MONTH_FIELD]
COORDINATE_FIELDS: List[str] = [LONGITUDE_FIELD, LATITUDE_FIELD]

# ======================================================
#  DATA QUALITY
# ======================================================
# Coordinates above these values mean "not recorded".
LONGITUDE_SENTINEL: float = 900
LATITUDE_SENTINEL: float = 90

# ======================================================
#  MAP DEFAULTS
# ======================================================
MAP_SCOPE: str = "usa"
MARKER_SIZE: int = 3
MARKER_COLOR: str = "black"
MAP_SIZE: Tuple[int, int] = (900, 600)
