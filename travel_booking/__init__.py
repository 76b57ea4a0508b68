"""Travel booking backend: accounts, bookings and flight/hotel/cab search."""
