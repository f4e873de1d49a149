"""Command line interface for view paths cache administration."""
