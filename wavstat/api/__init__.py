"""wavstat API - commands and domain logic behind the CLI."""
