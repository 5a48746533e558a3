"""Docnav - searchable, collapsible table of contents for documentation."""
