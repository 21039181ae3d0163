"""Command-line interface for sending one-off requests with httpsimp parsers."""
