"""Data model base classes for cityweather.

This module provides shared base classes like TimeStampModel used for
validating raw weather API data into immutable structured models.
"""
