"""Outbound notifications, run as FastAPI BackgroundTasks."""

import logging
import os

import httpx

from fixmycampus.database import models

logger = logging.getLogger(__name__)


def notify_issue_creation(issue: models.Issue) -> None:
    """Post a Slack message when a student reports a new issue.

    Runs after the response has been sent, so a slow or failing webhook
    never delays or breaks issue creation.

    Args:
        issue: The Issue model instance to notify about
    """
    slack_webhook_url = os.environ.get("SLACK_WEBHOOK_URL")
    if not slack_webhook_url:
        logger.debug("SLACK_WEBHOOK_URL not set, skipping notification")
        return

    summary = issue.description if len(issue.description) <= 200 else issue.description[:200] + "..."
    message = {"text": f"New {issue.category} issue on Fix My Campus: *{issue.title}*\n>{summary}"}

    try:
        response = httpx.post(slack_webhook_url, json=message, timeout=5.0)
        response.raise_for_status()
    except httpx.HTTPError:
        logger.exception("Slack notification failed", extra={"issue_id": issue.id})
        return

    logger.info("Slack notified about new issue", extra={"issue_id": issue.id, "category": issue.category})
