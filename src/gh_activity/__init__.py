"""GitHub profile and daily commit activity analyzer."""

__version__ = "0.1.0"
