"""Reviews app package: guest ratings of completed stays."""
