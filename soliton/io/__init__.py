"""I/O layer: artifact paths and Arrow schemas."""
