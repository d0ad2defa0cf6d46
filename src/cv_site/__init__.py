"""CV Site - personal CV website with an AI CV generator wizard."""

__version__ = "0.1.0"
