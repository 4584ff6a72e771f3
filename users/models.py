from django.contrib.auth.models import AbstractUser
from django.db import models

from .managers import UserManager


class User(AbstractUser):
    CUSTOMER = "customer"
    PARTNER = "partner"
    ROLES = (
        (CUSTOMER, "Customer"),
        (PARTNER, "Restaurant Partner"),
    )

    email = models.EmailField(unique=True)
    username = models.CharField(max_length=150, unique=True, blank=True)
    name = models.CharField(max_length=100)
    role = models.CharField(max_length=20, choices=ROLES, default=CUSTOMER, db_index=True)
    display_name = models.CharField(max_length=100, blank=True)
    phone = models.CharField(max_length=20, blank=True)
    address = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = UserManager()

    def save(self, *args, **kwargs):
        self.email = self.email.strip().lower()

        if not self.username:
            base_username = self.email.split("@")[0]
            self.username = f"{self.role}_{base_username}"

            counter = 1
            original_username = self.username
            while User.objects.filter(username=self.username).exclude(id=self.id).exists():
                self.username = f"{original_username}_{counter}"
                counter += 1

        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} - {self.get_role_display()}"
