"""Startup bootstrap: seeds default configuration and migrates legacy data.

Entry points live in :mod:`bootstrap.orchestrator` (``init`` and ``run``).
"""
