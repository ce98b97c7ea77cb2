"""Service layer for the sessionizer pipeline: candidates, selection, multiplexers."""
