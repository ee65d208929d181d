"""Test suite for the KMH probe.

Unit tests live under unit/, grouped by package area (timing, probe,
config, ...), with shared fakes in the helpers/ subpackage.
"""
