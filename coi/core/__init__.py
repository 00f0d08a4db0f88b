"""
Core validation engine: pattern tables, rule objects, chain state and models.
"""
