"""Configuration and constants for wavgen."""

# ===== AUDIO DEFAULTS (EDIT HERE) =====
SAMPLE_RATE_DEFAULT = 44_100
BITS_PER_SAMPLE = 16
SAMPLE_WIDTH_BYTES = 2
PCM_SCALE = 32767.0        # positive peak maps to +32767
PCM_MIN = -32768
PCM_MAX = 32767
MAX_SAMPLE_RATE = 0xFFFFFFFF // 4   # stereo byte rate must fit the 32-bit WAV field

# Used by the CLI when no length policy is given
DEFAULT_DURATION_S = 5.0
DEFAULT_ARRAY_LENGTH = 1024

# ===== SOURCE ARRAY LAYOUT =====
VALUES_PER_LINE = 10
VALUE_WIDTH = 6            # "-32768" is six characters
ARRAY_INDENT = "    "
DEFAULT_IDENTIFIER = "SAMPLES"

# ===== LOGGING =====
LOG_LEVEL_ENV = "WAVGEN_LOG_LEVEL"
LOG_LEVEL_DEFAULT = "WARNING"
