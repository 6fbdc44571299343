import logging

import requests
from celery import shared_task
from django.conf import settings

from notifications.models import TelegramSubscriber

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"


@shared_task(bind=True, autoretry_for=(requests.RequestException,),
             retry_kwargs={"max_retries": 3, "countdown": 10})
def send_telegram_notification(self, message: str) -> int:
    """
    Send notification message to all active Telegram subscribers
    """
    token = settings.TELEGRAM_BOT_TOKEN
    if not token:
        raise ValueError("TELEGRAM_BOT_TOKEN is missing")

    url = TELEGRAM_API_URL.format(token=token)

    sent = 0
    for subscriber in TelegramSubscriber.objects.filter(is_active=True).order_by("id"):
        payload = {
            "chat_id": subscriber.chat_id,
            "text": message,
        }

        response = requests.post(url, json=payload, timeout=5)
        response.raise_for_status()
        sent += 1

    logger.info(f"Telegram notification sent to {sent} subscriber(s)")
    return sent
