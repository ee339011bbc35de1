# SPDX-License-Identifier: MIT
"""Parser configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling how version strings are accepted.

    The defaults implement strict SemVer 2.0.0, under which rendering a parsed
    version reproduces the input exactly.
    """

    # Trim surrounding whitespace before matching
    strip_whitespace: bool = False
    # Accept a single leading "v" or "V", as in git tags like "v1.2.3"
    allow_v_prefix: bool = False


DEFAULT_OPTIONS = ParseOptions()
