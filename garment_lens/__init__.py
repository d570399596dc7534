"""
garment_lens - evidence-fusion classifier for secondhand fashion listings.
"""

__version__ = "1.0.0"
