"""
Global configuration and constants for the Heavy-Metal Water Quality Scoring Engine.
"""

# --- WHO Drinking Water Standards ---
# Guideline values for heavy metals in drinking water (mg/L)
# Source: WHO Guidelines for Drinking-water Quality, 4th ed.
WHO_STANDARDS = {
    "pb": 0.01,    # Lead
    "as": 0.01,    # Arsenic
    "cd": 0.003,   # Cadmium
    "cr": 0.05,    # Chromium
    "ni": 0.07,    # Nickel
}

# Toxicity weights for the weighted pollution indices
WEIGHT_FACTORS = {
    "pb": 4,   # Highest weight: neurotoxic
    "as": 4,   # Highest weight: carcinogenic
    "cd": 3,
    "cr": 2,
    "ni": 2,
}

METAL_NAMES = {
    "pb": "Lead",
    "as": "Arsenic",
    "cd": "Cadmium",
    "cr": "Chromium",
    "ni": "Nickel",
}

# Metals with the lowest tolerance for drinking and irrigation
CRITICAL_METALS = ("pb", "as", "cd")

# --- Rounding ---
INDEX_DECIMALS = 2             # HMPI, HPI, contributions, batch averages
METAL_INDEX_DECIMALS = 1       # Per-metal index score value
CONCENTRATION_DECIMALS = 4     # Concentration echoed in a metal index score

# --- Safety Classification ---
METAL_INDEX_LIMIT = 100.0      # Metal index above this exceeds the WHO guideline
HMPI_SAFE_MAX = 100.0          # Fallback path only (no per-metal scores)
HMPI_MODERATE_MAX = 200.0

# --- Risk Level (HPI step function) ---
HPI_LOW_MAX = 25.0
HPI_MEDIUM_MAX = 50.0
HPI_HIGH_MAX = 100.0

# --- Usability Breakpoints ---
DRINKING_CAUTION_INDEX = 75.0  # hmpi or hpi above this -> Caution
DRINKING_UNSAFE_HMPI = 100.0

# Per-metal index levels at which irrigation water damages crops and soil
AGRICULTURE_METAL_LIMITS = {
    "pb": 200.0,
    "as": 150.0,
    "cd": 200.0,
}
AGRICULTURE_UNSAFE_HMPI = 300.0
AGRICULTURE_UNSAFE_HPI = 200.0
AGRICULTURE_CAUTION_HMPI = 150.0
AGRICULTURE_CAUTION_HPI = 100.0

INDUSTRIAL_UNSAFE_HMPI = 500.0
INDUSTRIAL_UNSAFE_HPI = 400.0
INDUSTRIAL_CAUTION_HMPI = 300.0
INDUSTRIAL_CAUTION_HPI = 200.0

# --- Ingestion ---
# Canonical field -> accepted header spellings, consulted in order.
# Headers are normalized before lookup: unit suffixes in parentheses are
# dropped, then everything but [a-z0-9] is removed ("Lead (mg/L)" -> "lead").
COLUMN_ALIASES = (
    ("id", ("id", "sampleid")),
    ("latitude", ("latitude", "lat")),
    ("longitude", ("longitude", "lng", "lon", "long")),
    ("pb", ("pb", "lead")),
    ("as", ("as", "arsenic")),
    ("cd", ("cd", "cadmium")),
    ("cr", ("cr", "chromium")),
    ("ni", ("ni", "nickel")),
    ("pH", ("ph",)),
    ("conductivity", ("conductivity", "cond", "ec")),
    ("location", ("location",)),
    ("sampleDate", ("sampledate", "date")),
    ("collectedBy", ("collectedby", "collector")),
    ("notes", ("notes", "note")),
)

REQUIRED_COLUMNS = (
    "id", "latitude", "longitude", "pb", "as", "cd", "cr", "ni", "pH", "conductivity",
)
OPTIONAL_COLUMNS = ("location", "sampleDate", "collectedBy", "notes")
NUMERIC_FIELDS = ("latitude", "longitude", "pb", "as", "cd", "cr", "ni", "pH", "conductivity")

MISSING_NUMERIC_DEFAULT = 0.0  # Permissive default for blank numeric cells

PH_MIN = 0.0
PH_MAX = 14.0

# Tried in order when decoding uploaded text; latin-1 never fails
TEXT_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")
CSV_DELIMITERS = ",;\t|"

DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y", "%m/%d/%Y", "%Y/%m/%d")

# --- Demo Data ---
# Regional centres for synthetic samples (lat, lon)
DEMO_REGIONS = {
    "Delhi": (28.6139, 77.2090),
    "Mumbai": (19.0760, 72.8777),
    "Kolkata": (22.5726, 88.3639),
    "Chennai": (13.0827, 80.2707),
    "Bangalore": (12.9716, 77.5946),
}
DEMO_COORD_JITTER_DEG = 0.25   # +/- jitter around the regional centre

# Upper bounds of the uniform concentration draws (mg/L)
DEMO_CONCENTRATION_MAX = {
    "pb": 0.05,
    "as": 0.02,
    "cd": 0.01,
    "cr": 0.1,
    "ni": 0.15,
}
DEMO_PH_RANGE = (6.5, 8.5)
DEMO_CONDUCTIVITY_RANGE = (200.0, 1000.0)   # uS/cm
DEMO_DATE_SPAN_DAYS = 365
