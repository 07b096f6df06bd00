"""Event registry backend: events and participant registrations over MongoDB."""
