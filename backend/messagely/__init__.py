"""Messagely: user registration, login and message lookup backend."""
