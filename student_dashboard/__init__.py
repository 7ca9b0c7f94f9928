"""
Core package for the student dashboard application.

Submodules provide backend access, skill normalization, roster enrichment,
filtering, and user interface rendering helpers that are orchestrated by the
top-level `app.py`.
"""
