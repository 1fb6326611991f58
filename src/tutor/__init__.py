"""
tutor - a suite of small, self-contained Python language lessons.

Each lesson demonstrates one language feature and is run on demand::

    tutor list          # show every lesson
    tutor 7             # run lesson 7
    tutor borrowing     # same lesson, by slug
"""

__version__ = "0.1.0"
