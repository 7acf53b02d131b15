"""
GPS Collector backend.

Receives batches of GPS point-pairs, derives motion metrics and stores them.
"""

__version__ = "0.1.0"
