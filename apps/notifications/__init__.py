"""Email and SMS notifications for bookings and payments."""
