from .config import BreakConfig, load_config, parse_config
from .errors import ConfigError, GrammarInvariantError, LatexBreakError, UnbalancedRegionError
from .models import BreakMode, Line, MacroBreak
from .pipeline import LatexBreaker, break_latex
from .runner import main

__all__ = [
    "BreakConfig",
    "BreakMode",
    "ConfigError",
    "GrammarInvariantError",
    "LatexBreakError",
    "LatexBreaker",
    "Line",
    "MacroBreak",
    "UnbalancedRegionError",
    "break_latex",
    "load_config",
    "main",
    "parse_config",
]
