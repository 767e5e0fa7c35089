"""
Logging and metrics for fieldrules.
"""
