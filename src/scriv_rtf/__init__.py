"""Scriv RTF - convert Scrivener RTF documents to and from annotated text."""

from scriv_rtf.codec import decode, encode, append_text

__version__ = "1.3.2"

__all__ = ["decode", "encode", "append_text", "__version__"]
