"""Session token generation."""
import secrets
from datetime import datetime, timezone

# 24 random bytes -> 32 URL-safe characters (192 bits)
TOKEN_RANDOM_BYTES = 24

class TokenService:
    """Service for session token operations."""
    
    @staticmethod
    def generate(owner_id: int, timestamp: datetime) -> str:
        """
        Generate the token a session is redeemed with.
        Format: <owner_id>-<epoch_millis>-<random>

        Owner and time only make tokens easier to trace in logs; the random
        part is what makes them unguessable.
        """
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        millis = int(timestamp.timestamp() * 1000)
        return f"{owner_id}-{millis}-{secrets.token_urlsafe(TOKEN_RANDOM_BYTES)}"
