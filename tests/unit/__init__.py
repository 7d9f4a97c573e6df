"""
PySATL Numerics unit tests
==========================

Special functions, selection, estimators and the distribution families.
"""
