"""
Global settings and constants for weather-quant.

Policy thresholds and numeric tolerances. Every value can be overridden
from the environment (or a .env file); the frozen configs in
weather_quant.config.engine take their defaults from here.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# =============================================================================
# ROUNDING ANALYSIS
# =============================================================================

# Tolerance used when turning a half-open real interval into integer bounds
BOUNDARY_EPSILON = float(os.getenv("BOUNDARY_EPSILON", "1e-4"))

# Decimal places used for reported bounds and uncertainty
REPORT_DECIMALS = int(os.getenv("REPORT_DECIMALS", "1"))

# Pipeline used when a caller does not name one
DEFAULT_PIPELINE_ID = os.getenv("DEFAULT_PIPELINE", "ASOS_5MIN")


# =============================================================================
# FORECAST PARAMETERS
# =============================================================================

# Minimum standard deviation floor (prevent overconfidence when models agree)
MIN_STD_DEV = float(os.getenv("MIN_STD_DEV", "1.5"))  # degrees

# Model spread thresholds for consensus confidence
HIGH_CONFIDENCE_SPREAD = float(os.getenv("HIGH_CONFIDENCE_SPREAD", "3"))     # spread <= 3
MEDIUM_CONFIDENCE_SPREAD = float(os.getenv("MEDIUM_CONFIDENCE_SPREAD", "6"))  # spread <= 6


# =============================================================================
# EDGE PARAMETERS (percentage points)
# =============================================================================

FAIR_EDGE_THRESHOLD = float(os.getenv("FAIR_EDGE_THRESHOLD", "5"))
MEDIUM_EDGE_THRESHOLD = float(os.getenv("MEDIUM_EDGE_THRESHOLD", "10"))
LARGE_EDGE_THRESHOLD = float(os.getenv("LARGE_EDGE_THRESHOLD", "20"))
SIGNIFICANT_EDGE_THRESHOLD = float(os.getenv("SIGNIFICANT_EDGE_THRESHOLD", "10"))


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
