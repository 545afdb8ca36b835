"""Business services: batch song resolution and playlist assembly."""
