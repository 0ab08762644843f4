from pathlib import Path

# Paths
DATA_DIR = Path("data")
STATE_INFO_CSV = DATA_DIR / "State-Info.csv"
VOTE_RESULTS_XLSX = DATA_DIR / "Vote-Results.xlsx"
COUNTIES_CSV = DATA_DIR / "Voting-Counties.csv"
MAP_IMAGE = DATA_DIR / "us_map.png"
PLOTS_DIR = Path("plots")

BANNER = "========== Election Results Analyzer =========="
