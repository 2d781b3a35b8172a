# Roster construction
REQUIRED_PICKS = 6
COUNTED_GOLFERS = 4  # Best 4 of 6 count toward the entry score

# Tier values double as point costs (tier 0 is a free elite slot)
MIN_TIER = 0
MAX_TIER = 6
DEFAULT_MIN_TIER_POINTS = 21

# Warn when an entry spends this many points over the pool minimum
OVER_MINIMUM_WARNING = 3

# Scoring
MISSED_CUT_PENALTY = 80  # Strokes charged for each of R3/R4 after a missed cut
DEFAULT_PAR = 288  # Four rounds at par 72

# Tier display info (lower tier = better player = fewer points)
TIER_INFO = {
    0: {"label": "Tier 0", "points": 0, "owgr_range": "Elite"},
    1: {"label": "Tier 1", "points": 1, "owgr_range": "1-15"},
    2: {"label": "Tier 2", "points": 2, "owgr_range": "16-40"},
    3: {"label": "Tier 3", "points": 3, "owgr_range": "41-75"},
    4: {"label": "Tier 4", "points": 4, "owgr_range": "76-125"},
    5: {"label": "Tier 5", "points": 5, "owgr_range": "126-200"},
    6: {"label": "Tier 6", "points": 6, "owgr_range": "200+"},
}
