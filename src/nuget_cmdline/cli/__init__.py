"""CLI layer — process entry, error boundary, console output and help.

This package is the outermost layer.  It may import from ``core``; the
core never imports from ``cli``.
"""
