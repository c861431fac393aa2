"""Rutas para consultar y actualizar el perfil del usuario autenticado."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.users import get_user, update_profile
from app.domain.entities import Principal
from app.domain.exceptions import ApplicationError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_registered_user
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import ProfileUpdate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_registered_user),
) -> UserRead:
    """Devuelve la información del usuario autenticado."""

    try:
        user = get_user(db, principal.subject_id)
    except ApplicationError as exc:
        raise_http_error(exc)
    return UserRead.model_validate(user)


@router.put("/profile", response_model=UserRead)
def update_current_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_registered_user),
) -> UserRead:
    """Actualiza el perfil del usuario autenticado."""

    try:
        user = update_profile(
            db,
            user_id=principal.subject_id,
            name=payload.name,
            email=payload.email,
            birth_date=payload.birth_date,
            role=payload.role,
            current_password=payload.current_password,
            new_password=payload.new_password,
        )
    except ApplicationError as exc:
        raise_http_error(exc)
    return UserRead.model_validate(user)
