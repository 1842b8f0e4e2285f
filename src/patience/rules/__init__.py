"""Rule configuration and the rules engine."""
