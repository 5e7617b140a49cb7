"""
Configuration for Hold Finder.
"""
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).parent
DATA_DIR     = PROJECT_ROOT / "data"
RESULTS_DIR  = PROJECT_ROOT / "results"

MAIN_GRID_CSV = DATA_DIR / "HW7x10_Main_Line_Grid.csv"
AUX_GRID_CSV  = DATA_DIR / "HW7x10_Aux_Grid.csv"
WALL_IMAGE    = DATA_DIR / "wall.jpg"

# ── Dataset ───────────────────────────────────────────────────────────────────
HOLD_ROW_MARKER = "Hold #"         # first cell text of a hold-number row
DEFAULT_HOLD    = "1350"           # hold shown when the interactive prompt starts

# ── Grid layout ───────────────────────────────────────────────────────────────
# MAIN grid uses odd columns, AUX grid the even ones. Rows are listed top → bottom.
MAIN_COLUMNS = [f"C-{n}" for n in range(1, 22, 2)]     # C-1 .. C-21  (11)
AUX_COLUMNS  = [f"C-{n}" for n in range(2, 21, 2)]     # C-2 .. C-20  (10)

MAIN_ROWS = [f"R-{n}" for n in range(35, 6, -2)]       # R-35 .. R-7  (15)
AUX_ROWS  = [f"R-{n}" for n in range(34, 7, -2)]       # R-34 .. R-8  (14)

# Physical top → bottom order of every row on the wall (both grids interleaved)
ALL_ROWS = [f"R-{n}" for n in range(35, 6, -1)]        # R-35 .. R-7  (29)

# Panels are checked in this order; the first one containing the row wins
PANEL_ORDER = ["TOP", "MIDDLE", "BOTTOM"]

MAIN_PANELS = {
    "TOP":    ["R-35", "R-33", "R-31", "R-29", "R-27"],
    "MIDDLE": ["R-25", "R-23", "R-21", "R-19", "R-17"],
    "BOTTOM": ["R-15", "R-13", "R-11", "R-9", "R-7"],
}

AUX_PANELS = {
    "TOP":    ["R-34", "R-32", "R-30", "R-28"],
    "MIDDLE": ["R-26", "R-24", "R-22", "R-20", "R-18"],
    "BOTTOM": ["R-16", "R-14", "R-12", "R-10", "R-8"],
}

# ── Column calibration ────────────────────────────────────────────────────────
# Measured X pixel of each column at the top and bottom edge of the wall photo.
# The photo is slightly keystoned, so columns lean outwards towards the bottom.
COLUMN_CALIBRATION = {
    "C-1":  (40, 24),
    "C-2":  (77, 65),
    "C-3":  (117, 105),
    "C-4":  (157, 148),
    "C-5":  (195, 188),
    "C-6":  (235, 228),
    "C-7":  (272, 270),
    "C-8":  (312, 310),
    "C-9":  (350, 351),
    "C-10": (389, 392),
    "C-11": (428, 430),
    "C-12": (468, 472),
    "C-13": (506, 512),
    "C-14": (545, 553),
    "C-15": (585, 596),
    "C-16": (626, 636),
    "C-17": (663, 679),
    "C-18": (704, 720),
    "C-19": (742, 760),
    "C-20": (783, 803),
    "C-21": (822, 846),
}

# ── Highlight rendering ───────────────────────────────────────────────────────
# Colours are BGR (OpenCV convention)
HIGHLIGHT_STYLE    = "crosshair"     # "crosshair" | "marker"
COLUMN_COLOR       = (59, 235, 255)  # yellow
ROW_COLOR          = (243, 150, 33)  # blue
RING_COLOR         = (243, 150, 33)
HIGHLIGHT_ALPHA    = 0.5
HIGHLIGHT_WIDTH    = 30
CUTOUT_RADIUS      = 35
RING_RADIUS        = 65              # cutout (35) + line half-width (15) + ring half-width (15)
COLUMN_CURVE_STEPS = 50              # samples along the curved column indicator

# Marker presentation
MARKER_LINE_WIDTH  = 3
MARKER_DASH        = (12, 8)         # on / off pixels
MARKER_COLOR       = (54, 67, 244)   # red
MARKER_ALPHA       = 0.7
MARKER_RADIUS      = 25
MARKER_GLOW_RADIUS = 20              # blur radius of the glow around the marker
MARKER_CORE_COLOR  = (255, 255, 255)
MARKER_CORE_ALPHA  = 0.9
MARKER_CORE_RADIUS = 8
MARKER_LABELS      = True
FONT_SCALE         = 0.55
FONT_THICKNESS     = 1

# ── Voice ─────────────────────────────────────────────────────────────────────
# Fields read back after a spoken lookup, in this order
VOICE_FIELDS = ["panel", "row", "column", "grid", "angle"]
