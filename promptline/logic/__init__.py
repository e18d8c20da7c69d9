"""Prompting behaviour: coercion, validation, the ask loop and list layout."""
