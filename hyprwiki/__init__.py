"""hyprwiki: a two-pane terminal viewer with a Find popup."""

__version__ = "0.1.0"
