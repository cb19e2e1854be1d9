"""Diagnostics package.

Light-weight command line checks and tables; new_year_scatter additionally
needs the plot extras (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_lengths", "new_year_scatter"]
