"""
tests.fcs_monitor

Test suite for the fcs_monitor package: logging and path configuration,
Prometheus metric definitions, and the per-frame processing pipeline.
"""
