"""Bearer token validation for customer endpoints.

Tokens are issued elsewhere; this service only maps a configured set of
tokens to the user ids they authenticate.
"""


def parse_token_config(config: str) -> dict[str, str]:
    """Parse ``token:user_id`` pairs separated by commas.

    Entries without a colon or with an empty part are ignored.

    Args:
        config: Raw configuration string (e.g., "tok_a:user_1,tok_b:user_2")

    Returns:
        dict: Mapping of token to user id
    """
    tokens: dict[str, str] = {}
    for entry in config.split(","):
        token, sep, user_id = entry.strip().partition(":")
        if sep and token and user_id:
            tokens[token] = user_id
    return tokens


class BearerTokenValidator:
    """Resolves bearer tokens to user ids."""

    def __init__(self, tokens: dict[str, str]) -> None:
        """Initialize validator with known tokens.

        Args:
            tokens: Mapping of token to user id

        Raises:
            ValueError: If no tokens are configured
        """
        if not tokens:
            raise ValueError("At least one bearer token must be provided")

        self.tokens = dict(tokens)

    def resolve(self, token: str) -> str | None:
        """Return the user id for a token.

        Args:
            token: The bearer token to check

        Returns:
            The user id if the token is known, None otherwise
        """
        return self.tokens.get(token)
