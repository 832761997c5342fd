"""
Constants shared across the codec harness.

Well-known alphabets, the pad symbol, and harness-wide defaults live here so
generators, oracles and the engine adapter agree on a single source.
"""

# Well-known 64-symbol alphabets, index order is significant
STANDARD_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_SAFE_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

PAD_SYMBOL = "="
ALPHABET_SIZE = 64

# Printable ASCII punctuation outside both well-known alphabets and the pad
NEVER_VALID_SYMBOLS = "!@#$%^&*()[]{}|\\:;\"'<>?,.~`"

# Harness-wide defaults
DEFAULT_ITERATIONS = 1000
DEFAULT_MAX_INPUT_SIZE = 1024 * 1024
GENERATED_CONFIG_MAX_INPUT_SIZE = 1024

# Size ceilings used by the canonical property set
ROUNDTRIP_MAX_SIZE = 1000
MALFORMED_MAX_SIZE = 100

# Environment variables read by utilities.environment
ENV_ITERATIONS = "CODEC_HARNESS_ITERATIONS"
ENV_MAX_INPUT_SIZE = "CODEC_HARNESS_MAX_INPUT_SIZE"
ENV_SEED = "CODEC_HARNESS_SEED"
ENV_TRACK_MEMORY = "CODEC_HARNESS_TRACK_MEMORY"
