"""Scan engines: lock-file parsing, license detection, scanning, analysis."""
