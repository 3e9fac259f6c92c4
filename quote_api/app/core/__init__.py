"""Configuration, logging, storage and error types shared by the app."""
