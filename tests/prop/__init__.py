"""
Property-based tests for the unit decoders.

Hypothesis generates arbitrary byte streams and valid text; the invariants
are checked for every charset the dispatcher knows about.
"""
