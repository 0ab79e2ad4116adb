"""Scoring weights, thresholds and blend factors.

Product-tuning values, kept together so they can be adjusted in one place.
Penalty points are positive numbers subtracted from BASE_SCORE.
"""

# --- Score bounds ---
BASE_SCORE = 100
MAX_SCORE = 95  # certainty is never total: 100 is unreachable
MIN_SCORE = 0

# --- Age ---
NEW_TOKEN_DAYS = 7
EARLY_STAGE_HOURS = 24
NEW_TOKEN_OVERRIDE_SCORE = 25  # forced score when the new-token override fires

# --- Liquidity ---
MIN_LIQUIDITY_USD = 1_000.0

# --- Honeypot tax thresholds (percent) ---
HONEYPOT_TAX_PCT = 50.0

# --- Flag penalties ---
PENALTY_HONEYPOT = 50
PENALTY_MINT_AUTHORITY = 30
PENALTY_FREEZE_AUTHORITY = 25
PENALTY_OWNER_PRIVILEGES = 30
PENALTY_BLACKLIST = 20
PENALTY_NO_LIQUIDITY = 25
PENALTY_UNVERIFIED = 5
PENALTY_PROXY = 10
PENALTY_AGE_UNKNOWN = 10

# --- Confidence penalties and caps ---
PENALTY_LOW_CONFIDENCE = 15
PENALTY_MEDIUM_CONFIDENCE = 8
PENALTY_LEDGER_LIMITED = 15
CAP_LOW_CONFIDENCE = 65
CAP_MEDIUM_CONFIDENCE = 75
CAP_MEDIUM_CONFIDENCE_BELOW_PCT = 60

# --- Risk thresholds ---
CORE_LOW_RISK_MIN_SCORE = 85
LOW_RISK_MIN_SCORE = 80
MEDIUM_RISK_MIN_SCORE = 60
MEDIUM_CONFIDENCE_MIN_SCORE = 70

# --- Data confidence ---
PROVIDER_BASE_SCORE = 100
PROVIDER_PENALTY_SCANNER = 20
PROVIDER_PENALTY_INDEXER = 15
PROVIDER_PENALTY_EXPLORER = 10
PROVIDER_PENALTY_LEDGER = 10

COMPLETENESS_WEIGHT = 0.6
AVAILABILITY_WEIGHT = 0.4

HIGH_CONFIDENCE_MIN_BLEND = 75
HIGH_CONFIDENCE_MIN_PCT = 70
HIGH_CONFIDENCE_MIN_CHECKS = 5
MEDIUM_CONFIDENCE_MIN_BLEND = 50
MEDIUM_CONFIDENCE_MIN_PCT = 40
MEDIUM_CONFIDENCE_MIN_CHECKS = 3

# --- Fallback analysis ---
FALLBACK_SCORE_ALLOW_LISTED = 75
FALLBACK_SCORE_DEFAULT = 65
FALLBACK_PENALTY_ALLOW_LISTED = 25
FALLBACK_PENALTY_DEFAULT = 35
