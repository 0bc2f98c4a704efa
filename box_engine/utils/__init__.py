"""
Utility modules for the box engine.
"""

from box_engine.utils.config import Config
from box_engine.utils.logging import setup_logging, log_exception, PerformanceLogger
from box_engine.utils.scanner import Scanner

__all__ = [
    'Config',
    'Scanner',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
