import random
import time

from django.db import models


def make_profile_id() -> str:
    return f"PROF-{int(time.time() * 1000)}-{random.randint(0, 9999)}"


class Guest(models.Model):
    class Gender(models.TextChoices):
        MALE = "MALE"
        FEMALE = "FEMALE"
        OTHER = "OTHER"

    profile_id = models.CharField(max_length=40, unique=True)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    full_name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=50, blank=True)
    telephone = models.CharField(max_length=50, blank=True)
    nationality = models.CharField(max_length=80, blank=True)
    passport_number = models.CharField(max_length=50, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(choices=Gender, max_length=10, blank=True)
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    company = models.CharField(max_length=255, blank=True)
    guest_classification = models.CharField(max_length=100, blank=True)
    travel_agent = models.CharField(max_length=255, blank=True)
    source = models.CharField(max_length=100, blank=True)
    group = models.CharField(max_length=100, blank=True)
    is_vip = models.BooleanField(default=False)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.full_name or f"{self.first_name} {self.last_name}".strip() or self.profile_id

    def save(self, *args, **kwargs):
        if not self.profile_id:
            self.profile_id = make_profile_id()
        if not self.full_name:
            self.full_name = f"{self.first_name} {self.last_name}".strip()
        elif not self.first_name and not self.last_name:
            first, _, last = self.full_name.partition(" ")
            self.first_name, self.last_name = first, last
        super().save(*args, **kwargs)
