from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenRefreshView

from .serializers import (
    UserSignupSerializer,
    UserLoginSerializer,
    UserProfileSerializer,
    UserProfileUpdateSerializer,
)
from .services import UserSignupService, UserLoginService, UserProfileService


class UserSignupView(APIView):
    """
    Sign-up API
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Users"],
        summary="Register a new account",
        request=UserSignupSerializer,
    )
    def post(self, request):
        serializer = UserSignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = UserSignupService.create_user(serializer.validated_data)
        return Response({
            "status": 201,
            "message": "Account created.",
            "data": {
                "user_id": user.id,
                "email": user.email,
                "fullname": user.fullname,
                "created_at": user.created_at,
            }
        }, status=status.HTTP_201_CREATED)


class UserLoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Users"],
        summary="Log in with email and password",
        request=UserLoginSerializer,
    )
    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        token_data = UserLoginService().get_login_token(user)
        return Response({
            "status": 200,
            "message": "Login successful.",
            "data": {
                "user_id": user.id,
                "access_token": token_data['access'],
                "refresh_token": token_data['refresh'],
                "token_type": "Bearer"
            }
        }, status=status.HTTP_200_OK)


@extend_schema(tags=["Users"], summary="Refresh an access token")
class UserTokenRefreshView(TokenRefreshView):
    authentication_classes = []


class UserProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Users"],
        summary="Current user profile",
        responses={200: UserProfileSerializer},
    )
    def get(self, request):
        serializer = UserProfileSerializer(request.user)
        return Response({
            "status": 200,
            "message": "User profile.",
            "data": serializer.data
        }, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["Users"],
        summary="Update fullname or avatar",
        request=UserProfileUpdateSerializer,
        responses={200: UserProfileSerializer},
    )
    def put(self, request):
        serializer = UserProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = UserProfileService.update_profile(request.user, serializer.validated_data)
        return Response({
            "status": 200,
            "message": "Profile updated.",
            "data": UserProfileSerializer(user).data
        }, status=status.HTTP_200_OK)
