"""Session analysis: trip journal, summary statistics and charts.

Exports:
    TripLog: In-memory per-command journal
    TripEntry: One journal row
    plot_trip: Save a speed/distance chart of a journal
"""

from .plot import plot_trip
from .trip_log import TripEntry, TripLog

__all__ = ["TripLog", "TripEntry", "plot_trip"]
