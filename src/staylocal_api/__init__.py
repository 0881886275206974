"""REST API for the StayLocal booking engine."""
