"""Comma spacing rule configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommaSpacingOptions:
    """Feature flags for the comma spacing checks.

    `block_comment_starts_line`: a comma preceded on its line only by block
    comments and whitespace counts as first on the line. Off by default, so only
    a line break (optionally after a comment ending the previous line) exempts
    leading whitespace.
    """

    block_comment_starts_line: bool = False
