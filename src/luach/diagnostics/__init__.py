"""Diagnostics package.

Light-weight consistency checks and tables; year_lengths optionally uses the
numpy/matplotlib extras (pip install "luach[diagnostics]").
"""

__all__ = ["round_trip", "new_years_table", "year_lengths"]
