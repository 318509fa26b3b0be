# =============================================================================
# constants.py — SMM Symbol Table, Timing and Audio Constants
# =============================================================================
#
# The symbol table is CLOSED: exactly 40 characters.  Looking up anything
# else is a fatal error (see SGM/scheduler.py) — unsupported characters are
# never skipped or substituted, so the audio can never silently disagree
# with the text it was asked to send.

from types import MappingProxyType

# -----------------------------------------------------------------------------
# PARIS TIMING STANDARD
# -----------------------------------------------------------------------------
# "PARIS " is exactly 50 units long including its trailing word gap, so
# one word-per-minute = 50 units per 60 seconds.

ELEMENTS_PER_WORD = 50          # units in the word "PARIS "
SECONDS_PER_MINUTE = 60

DOT_UNITS       = 1             # '.'  tone length
DASH_UNITS      = 3             # '-'  tone length
SYMBOL_GAP_UNITS = 1            # silence between symbols of one character
CHAR_GAP_UNITS  = 3             # silence between characters
WORD_GAP_UNITS  = 7             # silence after a word

# -----------------------------------------------------------------------------
# AUDIO OUTPUT FORMAT  (fixed — mono, 8-bit unsigned PCM)
# -----------------------------------------------------------------------------

SAMPLE_RATE = 44_100            # Hz
CHANNELS    = 1
BIT_DEPTH   = 8

U8_CENTER    = 128              # DC center of the unsigned 8-bit range
U8_MAX_SWING = 127              # peak deviation; keeps tones inside [1, 255]
SILENCE_LEVEL = 0               # value emitted for SILENT samples

# Regression anchor: 44100 / (20 * 50 / 60) = 2646.0 exactly.
REFERENCE_WPM  = 20
REFERENCE_UNIT = 2_646

# -----------------------------------------------------------------------------
# DEFAULTS  (CLI / SynthParams)
# -----------------------------------------------------------------------------

DEFAULT_WPM       = 20
DEFAULT_FREQUENCY = 600.0       # Hz
DEFAULT_AMPLITUDE = 1.0         # fraction of U8_MAX_SWING
DEFAULT_MESSAGE   = "KD9KJV"
DEFAULT_OUTPUT    = "output.wav"

# Fade-in / fade-out window at each edge of a tone segment.
# 256 samples ≈ 5.8 ms at 44.1 kHz — short enough to keep dots crisp at
# high speed, long enough to remove the edge click.
FADE_SAMPLES = 256

# -----------------------------------------------------------------------------
# SYMBOL TABLE  (40 entries)
# Key   = uppercase character
# Value = code string over {'.', '-'}
# -----------------------------------------------------------------------------

MORSE_TABLE = MappingProxyType({
    # ── Letters ──────────────────────────────────────────────────────────
    "A": ".-",      "B": "-...",    "C": "-.-.",    "D": "-..",
    "E": ".",       "F": "..-.",    "G": "--.",     "H": "....",
    "I": "..",      "J": ".---",    "K": "-.-",     "L": ".-..",
    "M": "--",      "N": "-.",      "O": "---",     "P": ".--.",
    "Q": "--.-",    "R": ".-.",     "S": "...",     "T": "-",
    "U": "..-",     "V": "...-",    "W": ".--",     "X": "-..-",
    "Y": "-.--",    "Z": "--..",
    # ── Digits ───────────────────────────────────────────────────────────
    "0": "-----",   "1": ".----",   "2": "..---",   "3": "...--",
    "4": "....-",   "5": ".....",   "6": "-....",   "7": "--...",
    "8": "---..",   "9": "----.",
    # ── Punctuation ──────────────────────────────────────────────────────
    "?": "..--..",  ",": "--..--",  ".": ".-.-.-",  "/": "-..-.",
})

SYMBOL_COUNT = 40

# Convenience: reverse map  (code → character), used by the decoder
CODE_TO_CHAR = MappingProxyType({v: k for k, v in MORSE_TABLE.items()})
