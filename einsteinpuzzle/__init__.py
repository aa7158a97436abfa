"""Logic puzzle game data: table format, settings storage, top scores, tokenizer and binary helpers."""

__version__ = "0.1.0"