"""Header text shown above the picker list."""

from __future__ import annotations

from histscope.environment import Environment, get_environment
from histscope.scope import SCOPE_HEADERS, SCOPE_LABELS, Scope


def extra_info(scope: Scope, env: Environment) -> str:
    """The session, directory or host the scope is restricted to."""
    if scope is Scope.SESSION:
        return env.current_session_id()
    if scope is Scope.DIRECTORY:
        return env.current_directory()
    if scope is Scope.MACHINE:
        return env.current_host()
    return ""


def focus_line(label: str, value: str | None) -> str:
    if value is None:
        return ""
    return f"{label}: {value} "


def generate_title(scope: Scope, env: Environment | None = None) -> str:
    """Scope label, context and focus overrides, then the scope diagram."""
    env = env or get_environment()
    focus_session = focus_line("Session", env.focus_session())
    focus_dir = focus_line("Directory", env.focus_directory())
    return (
        f"{SCOPE_LABELS[scope]} {extra_info(scope, env)} {focus_session}{focus_dir}\n"
        f"{SCOPE_HEADERS[scope]}\n"
    )
