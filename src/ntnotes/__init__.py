"""Manages a flat directory of plain-text notes.

If you installed via ``pip``, run ``nt usage`` to get help.
Or, run ``python3 -m ntnotes usage``.

To use the Python API, look at :class:`ntnotes.api.Nt`
"""
