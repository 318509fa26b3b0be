# =============================================================================
# SGM — Signal Generation Module
# Subfolder of MCSE (Morse Code Synthesis Engine)
# =============================================================================
#
# Turns message text into a deterministic 8-bit PCM tone stream.
#
# Modules:
#   timing.py      — samples-per-unit from wpm + sample rate (PARIS standard)
#   scheduler.py   — text → ordered (SignalState, duration) segments
#   tone_synth.py  — segments → uint8 samples (sine + symmetric fade)
#   wav_export.py  — PCM_U8 mono WAV container read / write
#
# Constants live in MCSE/SMM/constants.py
# Verification tools live in MCSE/SVM/
# =============================================================================
