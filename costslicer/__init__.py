"""
Cost Slicer — 3D print cost calculator.

The estimator (cost_estimator.py) is pure math; everything else parses
form input and renders the breakdown.
"""
