import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "front_desk.settings")

app = Celery("front_desk")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
