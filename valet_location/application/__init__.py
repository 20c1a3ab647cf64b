"""Location Application Layer."""
