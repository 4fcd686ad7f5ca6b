"""Command implementations for the dhcpcdconf CLI."""
