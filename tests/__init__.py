"""
tests

Test suite for the fcs-frame-decoder project.

This package contains unit tests for the core decoder library and the
frame monitor layer.

Subpackages:
    - fcs_monitor: Tests for configuration, metrics and frame processing
"""
