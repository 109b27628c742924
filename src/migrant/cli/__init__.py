"""Command line interface for migrant."""
