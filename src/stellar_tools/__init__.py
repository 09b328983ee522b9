"""Tools to work with Stellar strkeys."""
