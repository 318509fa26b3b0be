# =============================================================================
# MCSE/SVM/__init__.py — Signal Verification Module
# =============================================================================
#
# The SVM checks rendered audio by decoding it back into text, so a WAV file
# can be verified without listening to it.
#
# Sub-modules:
#   morse_decoder.py — decodes a uint8 sample buffer into segments and text
#   wav_check.py     — CLI verifier for rendered WAV files
# =============================================================================
