"""
LOGMON - Terminal log monitor

Tails a growing log file, classifies and buffers recent entries, and offers
filtering, live statistics and follow mode in a Textual UI.
"""

__version__ = "0.1.0"
