"""Batch harness for pydfa.

File loading, verdict reporting, the append-to-input workflow and the
command-line driver. These collaborators feed the core pydfa library and are
not part of it.
"""
