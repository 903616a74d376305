"""Domain layer (pure logic).

- Keep the board game rules here: grid, movement, captures, turns, winner.
- Avoid I/O: no WebSockets, no FastAPI, no JSON.
- Prefer deterministic functions; the wire format lives in converter.py.
"""
