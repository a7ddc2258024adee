"""Raw inxi capture ingestion.

This module turns captured terminal text into clean text, then into
an immutable structured report for the serving layer.
"""
