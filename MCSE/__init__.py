# =============================================================================
# Morse Code Synthesis Engine (MCSE)
# =============================================================================
#
# ── PYTHON OWNS THE WHOLE RENDERED TIMELINE ──────────────────────────────────
#
# RESPONSIBLE for:
#   - Deterministic text-to-timing conversion
#       Every dot, dash and gap is an exact integer number of samples,
#       derived from one "unit" (samples per dot) on the PARIS grid.
#   - Click-free tone synthesis
#       Each tone segment starts and ends on the DC center of the 8-bit
#       range; a symmetric linear fade bounds the deviation at both edges.
#   - WAV file construction (mono, 8-bit unsigned PCM)
#   - Verification: decoding a rendered buffer back into text
#
# NOT responsible for:
#   - Real-time playback
#   - Character sets beyond the fixed 40-symbol table
#   - Streaming (the whole buffer is built in memory, then written)
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   CLI         → wpm, frequency, output path, message text
#   timing      → unit = int(sample_rate / (wpm * 50 / 60))
#   scheduler   → [(ACTIVE, 2646), (SILENT, 2646), ...]
#   tone_synth  → flat uint8 sample buffer
#   wav_export  → output.wav
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/constants.py     — symbol table, timing and audio constants
#   SGM/scheduler.py     — character / word / message schedulers
#   SGM/timing.py        — samples-per-unit calculator
#   SGM/tone_synth.py    — sine synthesis + fade envelope
#   SGM/wav_export.py    — PCM_U8 WAV container read / write
#   SVM/morse_decoder.py — rendered samples → segments → text
#   SVM/wav_check.py     — CLI verifier for rendered WAV files
#   morse_wav.py         — CLI: text → WAV
# =============================================================================

__version__ = "0.3.0"
