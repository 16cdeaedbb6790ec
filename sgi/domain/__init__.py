"""Domain layer for SGI Cidade.

Pure data and invariants: requests, timeline events, users,
notifications, view state and the error taxonomy. No I/O.
"""
