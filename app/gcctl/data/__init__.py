"""Bundled data files for gcctl."""
