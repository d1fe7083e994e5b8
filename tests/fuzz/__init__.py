"""Fuzz testing infrastructure for sexpreader.

This package contains:
- test_parser_depth_exhaustion: Boundary testing for MAX_DEPTH limits
- test_parser_robustness: Arbitrary input never escapes as an exception

Python 3.13+.
"""
