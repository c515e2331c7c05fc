"""Prepare an sbt or Mill workspace and submit its dependency snapshot."""

__version__ = "0.1.0"
