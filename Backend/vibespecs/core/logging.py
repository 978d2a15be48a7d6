import sys
import os
from datetime import datetime
from typing import Any, Optional


# ═══════════════════════════════════════════════════════════════════════════════
# LOG FILTERING
# ═══════════════════════════════════════════════════════════════════════════════
# Only these scopes are shown at INFO level
# Everything else is gated behind VIBESPECS_DEBUG

INFO_SCOPES = {
    "GENERATOR",    # PRD generation lifecycle
    "LLM",          # Provider boundary
    "STORE",        # Project / template persistence
    "AUTH",         # Accounts and sessions
    "SESSION",      # Client state machine transitions
    "DB",           # Database connection
    "API",          # Startup / routing
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "RETRY",
    "MONITORING",
    "RENDER",
}

DEBUG_MODE = os.getenv("VIBESPECS_DEBUG", "false").lower() == "true"


def log(scope: str, message: str, data: Any = None, project_id: Optional[str] = None) -> None:
    """
    Unified logging function for VibeSpecs.

    Only INFO_SCOPES are shown by default.
    Set VIBESPECS_DEBUG=true to see all scopes.
    """
    if not DEBUG_MODE and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    prefix = f"[{timestamp}] [{scope}]"

    if project_id:
        prefix += f" [{project_id[:8]}]"

    print(f"{prefix} {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str, project_id: Optional[str] = None) -> None:
    """
    Log a section header with visual separator.
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    if project_id:
        print(f"[{timestamp}] [{scope}] [{project_id[:8]}] {title}")
    else:
        print(f"[{timestamp}] [{scope}] {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
