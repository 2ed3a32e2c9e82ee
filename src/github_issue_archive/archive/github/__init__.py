"""GitHub access for the archive pipeline."""
