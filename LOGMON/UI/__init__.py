"""
Log Monitor UI Package - Textual front end for the log monitor core
"""

from .app import LogMonitorApp, run_app

__all__ = [
    'LogMonitorApp',
    'run_app',
]
