"""
Exceptions raised by the classifier.
"""


class InvalidInput(ValueError):
    """The caller supplied an item the classifier cannot work with (e.g. no text at all)."""
