"""Endpoints relacionados con autenticación de usuarios e invitados."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    authenticate_user,
    create_guest,
    register_user,
)
from app.domain.entities import Guest, PrincipalKind, User
from app.domain.exceptions import ApplicationError
from app.infrastructure.database import get_db
from app.infrastructure.security import issue_session_token
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    GuestAccessRequest,
    GuestRead,
    GuestToken,
    LoginRequest,
    RegisterRequest,
    UserRead,
    UserToken,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _user_token(user: User) -> UserToken:
    access_token = issue_session_token(
        PrincipalKind.USER, user.id, {"email": user.email}
    )
    return UserToken(
        access_token=access_token,
        user=UserRead.model_validate(user),
    )


def _guest_token(guest: Guest) -> GuestToken:
    access_token = issue_session_token(
        PrincipalKind.GUEST, guest.id, {"sessionId": guest.session_id}
    )
    return GuestToken(
        access_token=access_token,
        guest=GuestRead.model_validate(guest),
    )


@router.post("/register", response_model=UserToken, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> UserToken:
    """Registra un nuevo usuario y devuelve su token de acceso."""

    try:
        user = register_user(
            db,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            birth_date=payload.birth_date,
            role=payload.role,
        )
    except ApplicationError as exc:
        raise_http_error(exc)
    return _user_token(user)


@router.post("/login", response_model=UserToken)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> UserToken:
    """Autentica al usuario por correo electrónico y devuelve un token JWT."""

    try:
        user = authenticate_user(db, payload.email, payload.password)
    except ApplicationError as exc:
        logger.info("Intento de inicio de sesión fallido")
        raise_http_error(exc)
    return _user_token(user)


@router.post("/guest", response_model=GuestToken, status_code=status.HTTP_201_CREATED)
def guest_access(payload: GuestAccessRequest, db: Session = Depends(get_db)) -> GuestToken:
    """Crea una sesión de invitado con un identificador de sesión nuevo."""

    try:
        guest = create_guest(db, name=payload.name)
    except ApplicationError as exc:
        raise_http_error(exc)
    return _guest_token(guest)
