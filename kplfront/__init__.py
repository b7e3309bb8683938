"""Front end for the KPL language: character classes, tokens, errors, scanner and symbol table."""

__version__ = "0.1.0"