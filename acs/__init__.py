"""acs: a project launcher for AI coding CLIs."""
