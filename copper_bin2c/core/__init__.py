"""Core decoding and intermediate representation modules.

WHY: The core package holds the stable part of the converter: the
word-pair IR and the binary reader that builds it. Formatters consume
the IR and never touch the input file.

HOW: ir.py defines the data structures, reader.py decodes a binary
stream or file into them.

RULES:
- IR dataclasses are the contract between reading and formatting
- The reader is layout-agnostic; no formatting logic here
"""
