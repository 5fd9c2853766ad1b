"""Wallet screen-navigation and modal-interaction front end."""
