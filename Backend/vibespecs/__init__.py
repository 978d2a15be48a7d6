"""
VibeSpecs - turns a one-line app idea into a structured PRD.
"""
__version__ = "1.0.0"
