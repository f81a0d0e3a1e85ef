"""
ChatLens - WhatsApp Chat Analyzer

Parses WhatsApp chat exports and runs a chain of analyzers over them:
statistics, emojis, time patterns, Turkish sentiment, communication
dynamics, word usage and relationship heuristics.
"""

__version__ = "1.0.0"
__author__ = "ChatLens Team"

from . import config
from . import exceptions
from . import parser
from . import pipeline
from .pipeline import run_pipeline
from .premium import custom_date_range_analysis

__all__ = [
    "config",
    "exceptions",
    "parser",
    "pipeline",
    "run_pipeline",
    "custom_date_range_analysis",
]
