"""Scam phrase lists used as classification evidence."""

SUSPICIOUS_KEYWORDS: tuple[str, ...] = (
    "urgent",
    "click now",
    "verify account",
    "suspended",
    "winner",
    "congratulations",
    "transfer now",
    "otp",
    "account blocked",
    "legal action",
    "police",
)

# Transcripts are scored with a shorter list of single words.
TRANSCRIPT_KEYWORDS: tuple[str, ...] = (
    "transfer",
    "otp",
    "blocked",
    "police",
    "urgent",
)
