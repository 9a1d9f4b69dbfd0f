"""
fnshapes - Functional Shape Library

Named single-operation callable contracts (predicate, supplier, consumer,
function, operator and their primitive variants) with class-definition and
bind-time validation of the one-abstract-operation rule.
"""

__version__ = "0.1.0"
__author__ = "fnshapes Team"
