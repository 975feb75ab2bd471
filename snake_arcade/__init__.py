# Snake Arcade Source Package
"""
Snake Arcade - single-player grid Snake.

Modules:
- core: Presenter interface and render snapshots
- game: Game rules, session state, clock and controller (no pygame)
- visualization: Pygame and terminal presenters, pygame clock and key mapping
- utils: Configuration and logging setup
- app: Command-line entry point
"""

__version__ = "1.0.0"
