"""
File helpers for reading profit matrices and writing results.
"""
