"""Bootstrap wiring: logging setup and the mock deployment step."""
