"""
hackasm Command-Line Interface
==============================

- **hackasm**: assemble a Hack ``.asm`` file into ``.hack`` binary text

Implemented as a Click application with consistent exit codes.
"""

__all__ = ["hackasm"]
