"""Travel package catalog: packages, day-by-day itineraries and admin management."""
