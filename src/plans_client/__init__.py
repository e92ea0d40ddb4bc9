"""Client library and CLI for the plan management service."""
