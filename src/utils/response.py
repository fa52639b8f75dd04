from typing import Any, Dict

GENERIC_ERROR = "Error server"

def create_error_response(message: str = GENERIC_ERROR) -> Dict[str, Any]:
    return {"error": message}
