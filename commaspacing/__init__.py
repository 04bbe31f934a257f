"""Comma spacing lint rule: detection, diagnostics and fixes over a lossless token stream."""
