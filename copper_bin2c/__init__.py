"""Copper list binary to C array converter.

WHY: Copper lists are assembled to raw binary, a flat run of 16-bit
big-endian words. Test programs need those words as a C array literal
they can compile in and upload to the coprocessor.

HOW: Three-stage pipeline: read (decode the binary into word pairs),
hold (a small IR of ordered pairs), format (pluggable compact/expanded
array layouts). Each stage is independently testable; cli.py wires them.

RULES:
- Word values are transcribed, never interpreted or validated
- Pair order is file order
- Output goes to stdout only; the tool never writes files
"""

__version__ = "0.1.0"
