"""
Demonstration bindings for every catalog shape.

Importing this package binds closures, so entry points configure logging
before importing it.
"""
