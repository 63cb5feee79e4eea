"""Shared helpers for perf_tracker."""
