"""Header parsers, one module per header grammar."""
