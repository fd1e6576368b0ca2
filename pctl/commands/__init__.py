"""
Command package for pctl.

Importing pctl.commands.player registers the player commands with the
router in pctl.lib.router.
"""
