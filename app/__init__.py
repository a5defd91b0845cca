"""URL shortener web client."""
