import logging

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from booking.models import Booking
from notifications.tasks import send_telegram_notification

logger = logging.getLogger(__name__)


def booking_created_message(booking: Booking) -> str:
    return (
        "🆕 New booking created\n"
        f"Reservation: {booking.res_id}\n"
        f"Guest: {booking.guest}\n"
        f"Hotel: {booking.hotel.name}\n"
        f"Room: {booking.room.name} x {booking.number_of_rooms}\n"
        f"Check-in: {booking.check_in_date}\n"
        f"Check-out: {booking.check_out_date}\n"
        f"Total: {booking.total_amount}"
    )


def booking_cancelled_message(booking: Booking) -> str:
    return (
        "❌ Booking Canceled\n"
        f"Reservation: {booking.res_id}\n"
        f"Guest: {booking.guest}\n"
        f"Room: {booking.room.name} x {booking.number_of_rooms}\n"
        f"Dates: {booking.check_in_date} - {booking.check_out_date}"
    )


def _enqueue(message: str) -> None:
    transaction.on_commit(lambda: send_telegram_notification.delay(message))


@receiver(post_save, sender=Booking)
def booking_notification(sender, instance, created, update_fields=None, **kwargs):
    if not settings.TELEGRAM_BOT_TOKEN:
        return

    if created:
        _enqueue(booking_created_message(instance))
        logger.info(f"Queued new booking notification for {instance.res_id}")
        return

    status_changed = update_fields is not None and "status" in update_fields
    if status_changed and instance.status == Booking.BookingStatus.CANCELLED:
        _enqueue(booking_cancelled_message(instance))
        logger.info(f"Queued cancellation notification for {instance.res_id}")
