from django.contrib.auth import authenticate
from rest_framework import serializers

from .exceptions import InvalidCredentialsError
from .models import UserModel


class UserSignupSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)

    class Meta:
        model = UserModel
        fields = ['id', 'email', 'password', 'fullname', 'created_at']
        extra_kwargs = {
            'id': {'read_only': True},
            'created_at': {'read_only': True},
            # uniqueness is checked by the signup service
            'email': {'validators': []},
        }


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(style={'input_type': 'password'})

    def validate(self, data):
        user = authenticate(username=data['email'], password=data['password'])
        if user is None:
            raise InvalidCredentialsError()
        data['user'] = user
        return data


class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserModel
        fields = ['id', 'fullname', 'email', 'avatar', 'created_at']
        read_only_fields = fields


class UserProfileUpdateSerializer(serializers.Serializer):
    """Blank or omitted fields leave the stored value unchanged."""
    fullname = serializers.CharField(max_length=100, required=False, allow_blank=True)
    avatar = serializers.URLField(max_length=255, required=False, allow_blank=True)
