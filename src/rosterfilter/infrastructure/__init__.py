"""Infrastructure: persistence of filter collections."""
