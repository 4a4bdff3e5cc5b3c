"""Configuration engine for the xplr terminal file explorer."""
