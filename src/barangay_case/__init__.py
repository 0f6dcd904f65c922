"""Barangay case analyzer: intake classification, legal analysis and mediation reports."""

__version__ = "0.1.0"
