from django.db import models


class TelegramSubscriber(models.Model):
    """A Telegram chat of the front desk that receives booking alerts."""

    chat_id = models.BigIntegerField(unique=True)
    label = models.CharField(max_length=100, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.label or str(self.chat_id)
