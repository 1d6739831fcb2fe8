"""Application services orchestrating core logic for the API."""
