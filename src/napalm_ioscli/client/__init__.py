"""Interactive CLI client: transport, session state machine, command execution."""
