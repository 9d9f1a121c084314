"""funcprimer: a primer on functional programming idioms in Python.

Five classic idioms are demonstrated on a small, fixed set of hospital
patients and on plain integers:

    - functions taking functions as arguments
    - functions returning functions
    - function composition
    - currying and partial application
    - built-in higher-order collection operations
"""

__version__ = "0.1.0"
