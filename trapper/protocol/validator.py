# trapper/protocol/validator.py
from __future__ import annotations

import json
from typing import Any, Dict

from .errors import CollectorRejected, ProtocolError, MISSING_RESPONSE, NO_INFO


def validate_response(body: Any) -> Dict[str, Any]:
    """
    Classify a decoded acknowledgement.

    Returns the body unchanged when "response" is "success" (any case),
    raises CollectorRejected otherwise. The info string is handed over
    verbatim; splitting it into counters is left to the caller
    (see trapper.app.info).
    """
    if not isinstance(body, dict) or "response" not in body:
        raise ProtocolError(
            MISSING_RESPONSE,
            f"Invalid collector response: 'response' field missing. Full response: {body!r}",
            details={"response": body},
        )

    if str(body["response"]).lower() != "success":
        if "info" not in body:
            info = NO_INFO
        elif isinstance(body["info"], str):
            info = body["info"]
        else:
            # null, numbers and nested values keep their JSON spelling
            info = json.dumps(body["info"], ensure_ascii=False)
        raise CollectorRejected(info, body)

    return body
