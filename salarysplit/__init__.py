"""Divide a monthly salary across expenses, render the result as a PDF report, and serve both over HTTP."""

__version__ = "0.1.0"