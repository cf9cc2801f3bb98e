"""
Constants shared by the ManningMC pipeline and the Streamlit front end.
"""

# Number of Monte Carlo trials per run
SAMPLE_SIZE = 10000

# Bins used for every histogram
HISTOGRAM_BINS = 20

CSV_FILENAME = "ManningMCdata.csv"

# Seed offered in the sidebar when the user asks for reproducible sampling
DEFAULT_SEED = 42
