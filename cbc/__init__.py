"""Covered Bridge Capital partnership tracker."""

__version__ = "0.1.0"
