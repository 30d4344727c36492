"""Traffic duration sampling for ON/OFF sources.

This module provides the heavy-tailed Pareto distribution used to draw
ON and OFF dwell times.
"""
