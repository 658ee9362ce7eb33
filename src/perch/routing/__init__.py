"""Routing — the auth route table and the builder that filters it.

The table is fixed at import time. Each build walks it once, keeps the
entries the active config enables, and resolves their paths.
"""
