"""Pluggy markers and hook specifications for pluggable_json plugins."""
