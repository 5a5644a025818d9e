"""REPL front end, vocabulary storage and device actuation."""
