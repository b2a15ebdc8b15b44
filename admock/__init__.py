"""Mock REST backend for the ad-creation wizard."""

__version__ = "0.1.0"
