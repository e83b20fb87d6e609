import logging

from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import UserAlreadyExistsError
from .models import UserModel

logger = logging.getLogger(__name__)


class UserSignupService:
    """
    Account registration.
    """

    @staticmethod
    @transaction.atomic
    def create_user(data: dict) -> UserModel:
        email = UserModel.objects.normalize_email(data['email'])
        if UserModel.objects.filter(email__iexact=email).exists():
            raise UserAlreadyExistsError('email', email)

        try:
            with transaction.atomic():
                user = UserModel.objects.create_user(
                    email=email,
                    password=data['password'],
                    fullname=data['fullname'].strip(),
                )
        except IntegrityError:
            raise UserAlreadyExistsError('email', email)

        logger.info(f"Registered user {user.id}")
        return user


class UserLoginService:
    """Token pair issuance (delegated to simplejwt)."""

    def get_login_token(self, user):
        token = RefreshToken.for_user(user)
        return {
            'refresh': str(token),
            'access': str(token.access_token),
        }


class UserProfileService:
    """Self-service profile edits (fullname and avatar)."""

    @staticmethod
    def update_profile(user: UserModel, data: dict) -> UserModel:
        changed = []
        fullname = (data.get('fullname') or '').strip()
        if fullname:
            user.fullname = fullname
            changed.append('fullname')
        avatar = (data.get('avatar') or '').strip()
        if avatar:
            user.avatar = avatar
            changed.append('avatar')

        if changed:
            user.save(update_fields=changed + ['updated_at'])
            logger.info(f"Updated profile of user {user.id}: {', '.join(changed)}")
        return user
