"""
Utility functions module.

Soft-fail wrappers used by closures whose expected failures map onto a
documented default value instead of an exception.
"""
