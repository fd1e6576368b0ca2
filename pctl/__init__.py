"""pctl: a command-line controller for media players with templated output."""
