# SPDX-License-Identifier: MIT
"""Command line interface for semverkit.

Example:
    $ semverkit bump minor 1.4.2
    1.5.0
"""

__version__ = "0.1.0"
