from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Results directories
RESULTS_DIR = PROJECT_ROOT / "results"
RESULTS_VIZ_DIR = RESULTS_DIR / "visualizations"
RESULTS_BENCHMARKS_DIR = RESULTS_DIR / "benchmarks"

# Search parameters
DEFAULT_HEURISTIC = "penalty"
MAX_STEPS = 100000
TIME_LIMIT = 300  # seconds

# Visualization settings
VIZ_DPI = 300
VIZ_FIGSIZE = (8, 8)
ANIMATION_FPS = 4

# Logging configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
