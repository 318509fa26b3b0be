# =============================================================================
# MCSE/SMM/__init__.py — Symbol Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the Morse symbol table and for
# every timing and audio constant (PARIS word length, sample rate, bit depth,
# fade window, default tone).
#
# All other MCSE sub-modules (SGM, SVM) import exclusively from here.
# Never define timing or symbol constants outside this module.
#
# Sub-modules:
#   constants.py  — symbol table, reverse map, timing and audio defaults
# =============================================================================
