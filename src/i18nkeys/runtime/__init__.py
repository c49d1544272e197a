"""Translation runtime: typed lookup and argument substitution.

Python 3.13+. Zero external dependencies.
"""

from .formatting import normalize_template, substitute
from .translator import Translator, translate_text, translate_value
from .translator_config import TranslatorConfig
from .value_types import FormatArgument, TranslatedValue

__all__ = [
    "FormatArgument",
    "TranslatedValue",
    "Translator",
    "TranslatorConfig",
    "normalize_template",
    "substitute",
    "translate_text",
    "translate_value",
]
