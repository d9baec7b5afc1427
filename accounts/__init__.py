"""accounts - Account registration service with unique emails and bcrypt credentials."""
