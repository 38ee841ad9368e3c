"""Offers API: electricity market offers served as JSON."""
