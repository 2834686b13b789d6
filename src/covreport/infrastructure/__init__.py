"""Infrastructure: filesystem access and logging setup."""
