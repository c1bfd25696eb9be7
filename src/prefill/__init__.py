"""
Prefilled Form URL Package

Turns a declarative list of question/answer pairs into a Google Form
"prefilled" link.

ARCHITECTURAL GUARANTEE:
------------------------
The core (model + url_builder) contains ZERO knowledge of:
    - Config file formats
    - Command-line arguments
    - Console output

It transforms a base URL and a list of entries into two strings.

All I/O happens in external layers (config_loader, cli).
"""

__version__ = "0.1.0"
