"""Command line interface for ircwire."""
