"""Simplified grep: regex line search with highlighting and per-source counts."""

from .config import ColorMode as ColorMode
from .config import GreprConfig as GreprConfig
from .config import SearchOptions as SearchOptions
from .errors import GreprError as GreprError
from .errors import InvalidPatternError as InvalidPatternError
from .errors import SourceError as SourceError
from .formatter import HighlightMode as HighlightMode
from .formatter import format_line as format_line
from .matcher import MatchedLine as MatchedLine
from .matcher import MatchedWord as MatchedWord
from .matcher import extract_words as extract_words
from .matcher import match_text as match_text
from .matcher import scan as scan
from .pattern import Pattern as Pattern
from .runner import run as run
from .sources import resolve_sources as resolve_sources
