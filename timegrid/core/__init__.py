"""
Core plumbing: settings, clock and error types.
"""
