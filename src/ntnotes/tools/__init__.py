"""Runs the programs nt relies on for choosing, displaying, and editing notes.

:class:`ntnotes.tools.base.Tools` defines the API, and :class:`ntnotes.tools.external.ExternalTools` implements it
by starting subprocesses.
"""
