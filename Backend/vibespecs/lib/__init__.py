"""
Shared infrastructure helpers.
"""
