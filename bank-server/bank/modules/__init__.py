"""Domain modules: users, sessions, accounts, entries and transfers."""
