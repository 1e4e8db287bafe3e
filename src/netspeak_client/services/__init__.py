"""Service layer talking to remote Netspeak instances."""
