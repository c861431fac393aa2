"""Endpoints del feed de notificaciones y de su administración."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications,
    create_notification,
    delete_notification,
    dismiss_notification,
    get_notification,
    get_notification_stats,
    list_notifications,
    list_visible_notifications,
    mark_notifications_as_read,
    set_notification_active,
    update_notification,
)
from app.domain.entities import Notification, Principal
from app.domain.exceptions import ApplicationError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import (
    get_current_principal,
    require_admin,
    require_registered_user,
)
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    AdminCheckRead,
    MessageResponse,
    NotificationActivatedRead,
    NotificationBroadcastRead,
    NotificationCreate,
    NotificationCreatedRead,
    NotificationDeactivatedRead,
    NotificationDeletedRead,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationStatsRead,
    NotificationUpdate,
    NotificationUpdatedRead,
    UnreadCountRead,
    VisibleNotificationRead,
)
from app.utils import now_in_app_timezone

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_payload(notification: Notification, **extra: Any) -> dict[str, Any]:
    return {**asdict(notification), **extra}


def _create_payload_values(payload: NotificationCreate) -> dict[str, Any]:
    return {
        "title": payload.title,
        "message": payload.message,
        "type": payload.type,
        "priority": payload.priority,
        "is_active": payload.is_active,
        "expires_at": payload.expires_at,
        "action_url": str(payload.action_url) if payload.action_url else None,
        "action_text": payload.action_text,
    }


# ---- Rutas para usuarios ----


@router.get("", response_model=list[VisibleNotificationRead])
def list_feed(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> list[VisibleNotificationRead]:
    """Devuelve las notificaciones visibles para el usuario autenticado."""

    # Los invitados no reciben notificaciones personalizadas.
    if principal.is_guest:
        return []

    try:
        notifications = list_visible_notifications(db, principal.subject_id)
    except ApplicationError as exc:
        raise_http_error(exc)
    return [VisibleNotificationRead.model_validate(item) for item in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> UnreadCountRead:
    """Cuenta las notificaciones visibles que el usuario aún no leyó."""

    if principal.is_guest:
        return UnreadCountRead(count=0)
    return UnreadCountRead(count=count_unread_notifications(db, principal.subject_id))


@router.post("/mark-read", response_model=MessageResponse)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_registered_user),
) -> MessageResponse:
    """Marca como leídas las notificaciones indicadas."""

    try:
        mark_notifications_as_read(db, principal.subject_id, payload.notification_ids)
    except ApplicationError as exc:
        raise_http_error(exc)
    return MessageResponse(message="Notificaciones marcadas como leídas")


@router.post("/{notification_id}/dismiss", response_model=MessageResponse)
def dismiss(
    notification_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_registered_user),
) -> MessageResponse:
    """Oculta una notificación del feed del usuario."""

    try:
        dismiss_notification(db, principal.subject_id, notification_id)
    except ApplicationError as exc:
        raise_http_error(exc)
    return MessageResponse(message="Notificación dispensada")


# ---- Rutas administrativas ----


@router.get("/admin/check", response_model=AdminCheckRead)
def check_admin(principal: Principal = Depends(require_admin)) -> AdminCheckRead:
    """Confirma que el usuario autenticado tiene acceso administrativo."""

    return AdminCheckRead(
        is_admin=True,
        email=principal.email,
        message="Acceso administrativo confirmado",
    )


@router.post(
    "/admin",
    response_model=NotificationCreatedRead,
    status_code=status.HTTP_201_CREATED,
)
def create(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
) -> NotificationCreatedRead:
    """Crea una nueva notificación."""

    try:
        notification = create_notification(db, **_create_payload_values(payload))
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationCreatedRead.model_validate(
        _notification_payload(notification, created_by=principal.email)
    )


@router.get("/admin/all", response_model=list[NotificationRead])
def list_all(
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> list[NotificationRead]:
    """Lista todas las notificaciones, de la más reciente a la más antigua."""

    try:
        notifications = list_notifications(db)
    except ApplicationError as exc:
        raise_http_error(exc)
    return [NotificationRead.model_validate(item) for item in notifications]


@router.get("/admin/stats", response_model=NotificationStatsRead)
def stats(
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> NotificationStatsRead:
    """Devuelve estadísticas de las notificaciones registradas."""

    try:
        result = get_notification_stats(db)
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationStatsRead.model_validate(result)


@router.post(
    "/admin/broadcast",
    response_model=NotificationBroadcastRead,
    status_code=status.HTTP_201_CREATED,
)
def broadcast(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
) -> NotificationBroadcastRead:
    """Crea una notificación que se mostrará a todos los usuarios."""

    try:
        notification = create_notification(db, **_create_payload_values(payload))
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationBroadcastRead.model_validate(
        _notification_payload(
            notification,
            broadcast_by=principal.email,
            broadcast_at=now_in_app_timezone(),
            status_message="Notificación creada y será mostrada a todos los usuarios",
        )
    )


@router.get("/admin/{notification_id}", response_model=NotificationRead)
def read(
    notification_id: int,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> NotificationRead:
    """Obtiene la notificación identificada por ``notification_id``."""

    try:
        notification = get_notification(db, notification_id)
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationRead.model_validate(notification)


@router.patch("/admin/{notification_id}", response_model=NotificationUpdatedRead)
def update(
    notification_id: int,
    payload: NotificationUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
) -> NotificationUpdatedRead:
    """Actualiza parcialmente una notificación."""

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("action_url") is not None:
        changes["action_url"] = str(changes["action_url"])

    try:
        notification = update_notification(db, notification_id, changes)
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationUpdatedRead.model_validate(
        _notification_payload(notification, updated_by=principal.email)
    )


@router.patch(
    "/admin/{notification_id}/deactivate",
    response_model=NotificationDeactivatedRead,
)
def deactivate(
    notification_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
) -> NotificationDeactivatedRead:
    """Desactiva una notificación sin eliminarla."""

    try:
        notification = set_notification_active(db, notification_id, is_active=False)
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationDeactivatedRead.model_validate(
        _notification_payload(
            notification,
            deactivated_by=principal.email,
            status_message="Notificación desactivada con éxito",
        )
    )


@router.patch(
    "/admin/{notification_id}/activate",
    response_model=NotificationActivatedRead,
)
def activate(
    notification_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
) -> NotificationActivatedRead:
    """Reactiva una notificación."""

    try:
        notification = set_notification_active(db, notification_id, is_active=True)
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationActivatedRead.model_validate(
        _notification_payload(
            notification,
            activated_by=principal.email,
            status_message="Notificación activada con éxito",
        )
    )


@router.delete("/admin/{notification_id}", response_model=NotificationDeletedRead)
def remove(
    notification_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
) -> NotificationDeletedRead:
    """Elimina una notificación junto con sus marcas de lectura."""

    try:
        delete_notification(db, notification_id)
    except ApplicationError as exc:
        raise_http_error(exc)
    return NotificationDeletedRead(
        message="Notificación eliminada con éxito",
        deleted_by=principal.email,
        deleted_at=now_in_app_timezone(),
    )
