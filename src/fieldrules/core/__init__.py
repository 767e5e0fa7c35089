"""
Core rule models, built-in rules and the validation engine.
"""
