import logging

from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from .helpers import verify_password
from .models import User

logger = logging.getLogger(__name__)


class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "name", "role", "display_name", "phone", "address", "created_at"]
        read_only_fields = ["id", "email", "role", "created_at"]

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError("Name must be at least 2 characters")
        return value


class RegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)
    name = serializers.CharField(min_length=2, max_length=100)
    role = serializers.ChoiceField(choices=User.ROLES, default=User.CUSTOMER)

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with this email already exists")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            email=validated_data["email"],
            password=validated_data["password"],
            name=validated_data["name"],
            role=validated_data["role"],
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        user = User.objects.filter(email__iexact=attrs["email"].strip(), is_active=True).first()

        # Same answer for unknown email and wrong password.
        if user is None or not verify_password(attrs["password"], user.password):
            logger.info("Failed login attempt")
            raise AuthenticationFailed("Invalid credentials")

        attrs["user"] = user
        return attrs
