"""Users Presentation Layer (HTTP)."""
