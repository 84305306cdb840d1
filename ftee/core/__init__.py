"""Core splitting engine: line classifier, stream router and run driver."""
