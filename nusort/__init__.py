"""Japanese text tools: kana conversion, statistics tables, sort keys, guide and input engine."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "dict_guide",
    "h2k",
    "input_engine",
    "kana_stats_util",
    "unihan",
]