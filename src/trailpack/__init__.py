"""
Trip packing list engine.

Turns a trip's attributes into a versioned checklist of gear and manages the
suggestion lifecycle around it. Lambda handlers in src/handlers/ are thin
wrappers that call into trailpack/.
"""

__all__: list[str] = []
