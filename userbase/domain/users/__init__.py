"""Users bounded context: accounts and credentials."""
