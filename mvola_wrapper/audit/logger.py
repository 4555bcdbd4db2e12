"""
Diagnostic event log for provider traffic and callbacks.

Each outbound payment, its response, and every webhook received gets one
log line with:
  - Action (what happened)
  - Details (URL, headers with the token masked, bodies)

Nothing is stored; this is for operational debugging, not an audit-grade
record.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger("mvola_wrapper.audit")

MAX_DETAIL_CHARS = 2000


def log_event(action: str, details: Optional[dict[str, Any]] = None) -> str:
    """
    Emit one audit line.

    Args:
        action: What happened (e.g. "payment_request", "webhook_received").
        details: Arbitrary JSON-serializable context.

    Returns:
        The rendered details, as logged.
    """
    rendered = json.dumps(details, default=str, ensure_ascii=False)[:MAX_DETAIL_CHARS] if details else ""
    logger.info("AUDIT | action=%s | %s", action, rendered)
    return rendered
