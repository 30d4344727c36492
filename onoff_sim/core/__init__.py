"""Core components for ON/OFF traffic simulation.

This module contains the event model, the event queue, the traffic source
state machine, snapshots, statistics and the NetworkSimulator main loop.
"""
