"""
radec package
=============

Loads time-tagged right ascension / declination samples, filters them by
time window and object id, and plots them as a scatter chart.

- The CLI entry point is in `radec/cli.py`.
- Record parsing is in `radec/loader.py`.
- The pure filter/group operations are in `radec/store.py`.
- The interactive selection state is in `radec/session.py`.
"""

__version__ = '0.3.0'
