"""Well-known event type constants.

Defined centrally so publishers and subscribers reference the same strings.
"""

# --- Joke service → presentation ------------------------------------------

JOKES_STATE_CHANGED = "jokes.state.changed"
JOKES_NOTICE = "jokes.notice"
