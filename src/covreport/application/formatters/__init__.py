"""Output formats for coverage reports.

Built-in formats use stdlib only. Users can implement custom formats by
subclassing BaseFormatter or satisfying FormatterProtocol directly.
"""

from covreport.application.formatters._base import BaseFormatter
from covreport.application.formatters.html import HtmlFormatter
from covreport.application.formatters.text import TextFormatter

__all__ = [
    "BaseFormatter",
    "HtmlFormatter",
    "TextFormatter",
]
