"""
Configuration constants for report generation.

All tuning knobs for the provider client, the reference lookup policy and
the report labels live here so they are easy to find and adjust.
Values marked (env) can be overridden through environment variables.
"""

import os
from enum import Enum


# ============================================================================
# REMOTE API
# ============================================================================

# GraphQL endpoint of the tournament service (env: H5STATS_API_URL)
API_URL = os.getenv("H5STATS_API_URL", "https://h5-tournaments-api-5epg.shuttle.app/")

# Seconds before a single request is abandoned (env: H5STATS_API_TIMEOUT)
API_TIMEOUT = float(os.getenv("H5STATS_API_TIMEOUT", "30"))


# ============================================================================
# REFERENCE LOOKUP POLICY
# ============================================================================

class LookupPolicy(Enum):
    """What to do when a game or match references an unknown race, hero or user."""
    SKIP = "skip"      # log and drop the offending record
    ABORT = "abort"    # raise ReferenceLookupError and stop the run


def get_lookup_policy(value: str = None) -> LookupPolicy:
    """
    Resolve the lookup policy from an explicit value or H5STATS_LOOKUP_POLICY.

    Unknown values fall back to SKIP so one bad game never voids a report.
    """
    if value is None:
        value = os.getenv("H5STATS_LOOKUP_POLICY", LookupPolicy.SKIP.value)
    try:
        return LookupPolicy(value.strip().lower())
    except ValueError:
        return LookupPolicy.SKIP


# ============================================================================
# REPORT LABELS
# ============================================================================

NO_GAMES_LABEL = "No games"
PERCENT_FORMAT = "0.000%"

OVERVIEW_SHEET = "Race Overview"

WIN_LABEL = "Win"
LOSS_LABEL = "Loss"

BARGAINS_COLOR_LABELS = {
    "red": "Red",
    "blue": "Blue",
}

OUTCOME_LABELS = {
    "final_battle_victory": "Final battle",
    "neutrals_victory": "Neutrals",
    "opponent_surrender": "Surrender",
}
