"""User-facing interfaces for tally."""
