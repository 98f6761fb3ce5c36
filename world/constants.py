"""Simulation constants. World size and tick interval match the classic 30x30 board at 4 ticks/s."""

DEFAULT_WIDTH, DEFAULT_HEIGHT = 30, 30
TICK_INTERVAL_MS = 250
# Horizontal neighbour offsets, in candidate order: left first, then right.
SIDE_OFFSETS = (-1, 1)
