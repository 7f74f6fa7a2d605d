import json
from lzstring import LZString
from pydantic import BaseModel, Field, ValidationError

_codec = LZString()


class StateDecodeError(ValueError):
    """Raised when a state string from the server can't be decoded."""


class ClientGameState(BaseModel):
    """The part of the game state the client carries between commands."""
    inventory: list[str] = Field(default_factory=list)

    def to_state_string(self) -> str:
        """Serializes to JSON and compresses it into a URI-safe string."""
        # ASCII-only JSON: the codec truncates code points above U+FFFF
        raw_json = json.dumps(self.model_dump(), separators=(",", ":"))
        return _codec.compressToEncodedURIComponent(raw_json)

    @classmethod
    def from_state_string(cls, state_string: str) -> "ClientGameState":
        try:
            raw_json = _codec.decompressFromEncodedURIComponent(state_string)
        except Exception as e:
            raise StateDecodeError(f"Failed to decompress state string: {state_string!r}") from e
        if not raw_json:
            raise StateDecodeError(f"Failed to decompress state string: {state_string!r}")
        try:
            return cls.model_validate(json.loads(raw_json))
        except (json.JSONDecodeError, ValidationError) as e:
            raise StateDecodeError(f"Failed to deserialise JSON state: {raw_json}") from e
