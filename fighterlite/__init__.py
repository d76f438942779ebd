"""A small side-scrolling brawler: state-driven player, enemy squads, pickable rocks and pygame screens."""

__version__ = "0.1.0"