"""HTTP Interface."""
