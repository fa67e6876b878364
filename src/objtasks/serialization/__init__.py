from objtasks.serialization.json_codec import from_json, get_json

__all__ = ["get_json", "from_json"]
