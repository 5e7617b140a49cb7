"""
Exceptions raised by Hold Finder.

All lookup failures derive from the builtin LookupError so that callers can
treat "not found" uniformly. ConfigurationError also derives from it: a
missing calibration or band entry surfaces at lookup time, but it points at a
layout bug rather than a user typo.
"""


class GridLookupError(LookupError):
    """A row or column label is not part of the wall layout."""


class HoldNotFoundError(LookupError):
    """A hold identifier is not present in the dataset."""

    def __init__(self, hold_id: str):
        super().__init__(f'Hold "{hold_id}" not found')
        self.hold_id = hold_id


class ConfigurationError(LookupError):
    """The static layout or calibration is inconsistent."""


class DatasetError(Exception):
    """A dataset source could not be read."""
