"""Background tasks module.

FastAPI BackgroundTasks for quick, fire-and-forget work that must not
block the request, such as outbound notifications.
"""

from fixmycampus.tasks.notifications import notify_issue_creation

__all__ = ["notify_issue_creation"]
