"""wavstat - duration statistics for directory trees of WAV files."""
