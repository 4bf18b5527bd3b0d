import os

from celery import Celery
from celery.schedules import crontab  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("tripholiday")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Pending payment reminders, daily at 10:00
    "send-pending-payment-reminders": {
        "task": "bookings.send_pending_payment_reminders",
        "schedule": crontab(minute=0, hour=10),
    },
}

app.conf.timezone = "Asia/Kolkata"
