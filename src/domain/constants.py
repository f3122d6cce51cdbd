from datetime import timedelta

# Reset policy
RESET_TOKEN_BYTES = 32
RESET_TOKEN_TTL = timedelta(hours=2)
MIN_PASSWORD_LENGTH = 6
