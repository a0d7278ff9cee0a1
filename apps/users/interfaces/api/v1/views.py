"""
Users API v1 views.
"""
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces import domain_error_response
from ....application.dtos.user_dto import CreateUserDTO
from ....dependencies import build_create_user_use_case
from ...serializers.user_serializer import UserSerializer, UserCreateSerializer


@extend_schema(tags=['Users'])
class UserCreateView(APIView):
    """User registration endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserCreateSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(description="Invalid payload or weak password"),
            409: OpenApiResponse(description="Email already registered"),
        },
        summary="Register a new user",
    )
    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        # Create use case
        use_case = build_create_user_use_case()

        # Execute
        input_dto = CreateUserDTO(**serializer.validated_data)
        result = use_case.execute(input_dto)
        if not result.success:
            return domain_error_response(result.error)

        # Return response
        output_serializer = UserSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)
